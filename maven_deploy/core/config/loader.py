"""
Configuration loader — reads maven-deploy.yml into a raw config map.

Used by the CLI.  Hosts that embed the deployer pass their own map to
``execute``/``validate_config`` and never touch this module.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "maven-deploy.yml"

# Optional wrapper key: the file may nest everything under "maven:"
_SECTION = "maven"


class ConfigError(Exception):
    """Raised when the config file is missing or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for maven-deploy.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to the config file, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config_map(path: Path | None = None) -> dict[str, Any]:
    """Load the raw deploy configuration.

    Only YAML syntax is checked here.  Field values are validated later
    by ``validate_config`` or the deploy pipeline.

    Args:
        path: Explicit path to the config file. If None, searches upward.

    Raises:
        ConfigError: If the file is missing, unreadable or not a mapping.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        raise ConfigError(f"No {CONFIG_FILE} found. Create one or pass --config.")

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading deploy config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    if isinstance(data.get(_SECTION), dict):
        data = data[_SECTION]

    logger.info("Loaded deploy config from %s (%d keys)", path, len(data))
    return data
