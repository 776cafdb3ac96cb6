"""
Maven command builder — config in, argv out.

The returned list is handed to the process adapter as discrete argv
elements and never joined into a shell string.  Every token comes
either from a literal here or from a field that passed its validator.
"""

from __future__ import annotations

import logging

from maven_deploy.core.errors import BuildError, ValidationError
from maven_deploy.core.models.deploy import DEFAULT_POM_PATH, DeployConfig
from maven_deploy.core.security.validators import validate_path, validate_profile

logger = logging.getLogger(__name__)

MAVEN_CLI = "mvn"


def build_maven_command(config: DeployConfig) -> list[str]:
    """Build the ``mvn`` argument list for a deploy.

    Token order is fixed:
        deploy -f <pom> [-DskipTests] [-s <settings>] [-P <p1,p2,...>]

    Raises:
        BuildError: the first token that failed validation.
    """
    args = ["deploy"]

    pom_path = config.pom_path or DEFAULT_POM_PATH
    try:
        validate_path(pom_path, "pom_path")
    except ValidationError as e:
        raise BuildError(f"invalid pom_path: {e}", field="pom_path") from e
    args += ["-f", pom_path]

    if config.skip_tests:
        args.append("-DskipTests")

    if config.settings:
        try:
            validate_path(config.settings, "settings")
        except ValidationError as e:
            raise BuildError(f"invalid settings path: {e}", field="settings") from e
        args += ["-s", config.settings]

    if config.profiles:
        for profile in config.profiles:
            try:
                validate_profile(profile)
            except ValidationError as e:
                raise BuildError(f"invalid profile '{profile}': {e}", field="profiles") from e
        args += ["-P", ",".join(config.profiles)]

    logger.debug("Built maven command: %s %s", MAVEN_CLI, " ".join(args))
    return args


def render_command(args: list[str]) -> str:
    """The preview string shown for dry runs. Not for execution."""
    return " ".join([MAVEN_CLI, *args])
