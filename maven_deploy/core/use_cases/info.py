"""
Info use case — static metadata a host uses to register the deployer.
"""

from __future__ import annotations

from typing import Any

from maven_deploy import __version__
from maven_deploy.core.models.deploy import DEFAULT_POM_PATH, Hook, PluginInfo

PLUGIN_NAME = "maven"

CONFIG_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "group_id": {"type": "string", "description": "Maven group ID (e.g., com.example)"},
        "artifact_id": {"type": "string", "description": "Maven artifact ID"},
        "pom_path": {"type": "string", "description": "Path to pom.xml", "default": DEFAULT_POM_PATH},
        "username": {
            "type": "string",
            "description": "Maven repository username (or use MAVEN_USERNAME env)",
        },
        "password": {
            "type": "string",
            "description": "Maven repository password (or use MAVEN_PASSWORD env)",
        },
        "repository": {"type": "string", "description": "Maven repository URL"},
        "skip_tests": {"type": "boolean", "description": "Skip tests during deploy", "default": False},
        "settings": {"type": "string", "description": "Path to settings.xml (optional)"},
        "profiles": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Maven profiles to activate (optional)",
        },
    },
    "required": ["group_id", "artifact_id"],
}


def get_info() -> PluginInfo:
    """Describe this deployer: name, version, handled hooks, config schema."""
    return PluginInfo(
        name=PLUGIN_NAME,
        version=__version__,
        description="Publish artifacts to Maven Central (Java)",
        author="Maven Deploy Maintainers",
        hooks=[Hook.POST_PUBLISH],
        config_schema=CONFIG_SCHEMA,
    )
