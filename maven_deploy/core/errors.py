"""
Error hierarchy for the deploy core.

Validators and the command builder raise these. The public entry points
(``execute`` and ``validate_config``) catch them and turn them into
structured responses, so nothing here ever escapes to the host process.
"""

from __future__ import annotations


class DeployError(Exception):
    """Base class for every failure the deploy core reports."""


class ValidationError(DeployError):
    """A single field failed validation.

    ``str(err)`` is the user-facing message, suitable for direct display.
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field!r}, message={self.message!r})"


class ResolutionError(ValidationError):
    """DNS lookup failed while checking the repository URL."""

    def __init__(self, message: str, field: str = "repository"):
        super().__init__(field, message)


class BuildError(DeployError):
    """A derived command token failed validation.

    The originating ``ValidationError`` is chained as ``__cause__``.
    """

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class ExecutionError(DeployError):
    """The external process failed, was cancelled, or could not start."""

    def __init__(self, message: str, output: str = ""):
        super().__init__(message)
        self.output = output

    def __str__(self) -> str:
        return f"{self.args[0]}\nOutput: {self.output}"
