"""
Field validators — grammar checks for everything that reaches argv.

Each validator returns ``None`` when the value is acceptable and raises
``ValidationError`` otherwise.  They are pure functions: no I/O, no
filesystem access, no shared mutable state.
"""

from __future__ import annotations

import os
import re

from maven_deploy.core.errors import ValidationError

# groupId / artifactId: alphanumerics, dots, dashes, underscores
COORDINATE_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]*")

# Profile names: leading letter, then alphanumerics, dashes, underscores
PROFILE_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")

MAX_COORDINATE_LENGTH = 256
MAX_PROFILE_LENGTH = 128

_PARENT = os.pardir


def validate_coordinate(value: str, field_name: str) -> None:
    """Validate a Maven group ID or artifact ID.

    Args:
        value: The coordinate to check.
        field_name: Reported in the error (e.g. ``"group_id"``).

    Raises:
        ValidationError: tagged with ``field_name``.
    """
    if not value:
        raise ValidationError(field_name, f"{field_name} cannot be empty")
    if len(value) > MAX_COORDINATE_LENGTH:
        raise ValidationError(
            field_name,
            f"{field_name} too long (max {MAX_COORDINATE_LENGTH} characters)",
        )
    if not COORDINATE_PATTERN.fullmatch(value):
        raise ValidationError(field_name, f"invalid {field_name}: contains disallowed characters")
    # The grammar already admits "..", so reject it explicitly
    if ".." in value:
        raise ValidationError(field_name, f"{field_name} cannot contain '..'")


def canonical_path(path: str) -> str:
    """Lexically normalise ``path``: collapse ``.``, ``..`` and duplicate separators."""
    return os.path.normpath(path)


def validate_path(path: str, field_name: str = "path") -> None:
    """Reject absolute paths and paths that climb out of the working directory.

    The checks run on the canonical form, so ``foo/../../etc/passwd`` is
    caught even though it does not start with ``..``.  An empty path is
    valid; callers substitute their own default.
    """
    if not path:
        return

    cleaned = canonical_path(path)

    if os.path.isabs(cleaned):
        raise ValidationError(field_name, "absolute paths are not allowed")

    segments = cleaned.replace(os.sep, "/").split("/")
    if _PARENT in segments:
        raise ValidationError(
            field_name,
            "path traversal detected: cannot use '..' to escape working directory",
        )


def validate_profile(name: str) -> None:
    """Validate a single Maven profile name."""
    if not name:
        raise ValidationError("profiles", "profile name cannot be empty")
    if len(name) > MAX_PROFILE_LENGTH:
        raise ValidationError(
            "profiles", f"profile name too long (max {MAX_PROFILE_LENGTH} characters)"
        )
    if not PROFILE_PATTERN.fullmatch(name):
        raise ValidationError(
            "profiles", "invalid profile name: must be alphanumeric with dashes or underscores"
        )
