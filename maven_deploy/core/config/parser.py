"""
Config parser — typed access to the raw configuration map.

Hosts hand us a loosely-typed ``dict`` (decoded JSON or YAML).  The
parser turns it into a frozen ``DeployConfig``.  Lookups fall back to
environment variables where a field allows it; credentials are the
only such fields.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from maven_deploy.core.models.deploy import DEFAULT_POM_PATH, DeployConfig

USERNAME_ENV = "MAVEN_USERNAME"
PASSWORD_ENV = "MAVEN_PASSWORD"

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off", ""})


class ConfigParser:
    """Typed getters over a raw config map.

    Missing keys, ``None`` values and values of the wrong type all fall
    back to the default rather than raising; validation is a separate
    step.
    """

    def __init__(self, raw: Mapping[str, Any] | None, environ: Mapping[str, str] | None = None):
        self._raw = raw or {}
        self._environ = os.environ if environ is None else environ

    def get_string(self, key: str, env_var: str = "", default: str = "") -> str:
        """Config value, else ``env_var`` from the environment, else ``default``."""
        value = self._raw.get(key)
        if isinstance(value, str) and value:
            return value
        if env_var:
            env_value = self._environ.get(env_var, "")
            if env_value:
                return env_value
        return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._raw.get(key)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        return default

    def get_string_list(self, key: str, default: list[str] | None = None) -> list[str]:
        """A list of strings; accepts a YAML/JSON list or a comma-separated string."""
        value = self._raw.get(key)
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value if isinstance(item, (str, int, float))]
        return list(default) if default is not None else []


def parse_config(raw: Mapping[str, Any] | None, environ: Mapping[str, str] | None = None) -> DeployConfig:
    """Build a ``DeployConfig`` from a raw map. Never raises on bad values."""
    parser = ConfigParser(raw, environ)
    return DeployConfig(
        group_id=parser.get_string("group_id"),
        artifact_id=parser.get_string("artifact_id"),
        pom_path=parser.get_string("pom_path", default=DEFAULT_POM_PATH),
        username=parser.get_string("username", USERNAME_ENV),
        password=parser.get_string("password", PASSWORD_ENV),
        repository=parser.get_string("repository"),
        skip_tests=parser.get_bool("skip_tests"),
        settings=parser.get_string("settings"),
        profiles=tuple(parser.get_string_list("profiles")),
    )
