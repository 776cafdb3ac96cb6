"""
Validate use case — report every configuration problem at once.

Unlike the deploy pipeline, which stops at the first bad field, this
checks each field independently so a configuration UI can highlight
all of them in one pass.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from maven_deploy.core.config.parser import ConfigParser
from maven_deploy.core.errors import ValidationError
from maven_deploy.core.models.deploy import DEFAULT_POM_PATH, ValidateResponse
from maven_deploy.core.security.network import Resolver, validate_repository_url
from maven_deploy.core.security.validators import (
    validate_coordinate,
    validate_path,
    validate_profile,
)


def validate_config(
    config: Mapping[str, Any] | None,
    *,
    resolver: Resolver | None = None,
) -> ValidateResponse:
    """Check a raw config map and collect every failure.

    Args:
        config: The raw configuration map from the host.
        resolver: Override for repository host resolution (tests).

    Returns:
        ValidateResponse with ``valid`` and one issue per failing check.
    """
    response = ValidateResponse()
    parser = ConfigParser(config, environ={})

    group_id = parser.get_string("group_id")
    if not group_id:
        response.add_error("group_id", "Maven group ID is required")
    else:
        _check(response, "group_id", validate_coordinate, group_id, "group_id")

    artifact_id = parser.get_string("artifact_id")
    if not artifact_id:
        response.add_error("artifact_id", "Maven artifact ID is required")
    else:
        _check(response, "artifact_id", validate_coordinate, artifact_id, "artifact_id")

    pom_path = parser.get_string("pom_path", default=DEFAULT_POM_PATH)
    _check(response, "pom_path", validate_path, pom_path)

    repository = parser.get_string("repository")
    if repository:
        _check(response, "repository", validate_repository_url, repository, resolver=resolver)

    settings = parser.get_string("settings")
    if settings:
        _check(response, "settings", validate_path, settings)

    for profile in parser.get_string_list("profiles"):
        try:
            validate_profile(profile)
        except ValidationError as e:
            response.add_error("profiles", f"invalid profile '{profile}': {e}")

    return response


def _check(response: ValidateResponse, field: str, validator, *args: Any, **kwargs: Any) -> None:
    try:
        validator(*args, **kwargs)
    except ValidationError as e:
        response.add_error(field, str(e))
