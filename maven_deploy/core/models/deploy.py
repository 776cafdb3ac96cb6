"""
Deploy models — configuration, hook requests and responses.

``DeployConfig`` is the typed view of the operator's configuration for a
single deploy attempt.  It is frozen: once parsed, nothing downstream
can change what was validated.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_POM_PATH = "pom.xml"


class Hook(str, Enum):
    """Release lifecycle hooks a host can dispatch."""

    PRE_INIT = "pre-init"
    POST_INIT = "post-init"
    PRE_VERSION = "pre-version"
    POST_VERSION = "post-version"
    PRE_NOTES = "pre-notes"
    POST_NOTES = "post-notes"
    PRE_PUBLISH = "pre-publish"
    POST_PUBLISH = "post-publish"
    ON_SUCCESS = "on-success"
    ON_ERROR = "on-error"


class DeployConfig(BaseModel):
    """Maven deploy configuration for one invocation."""

    model_config = ConfigDict(frozen=True)

    group_id: str = ""
    artifact_id: str = ""
    pom_path: str = DEFAULT_POM_PATH
    username: str = ""
    password: str = Field(default="", repr=False)
    repository: str = ""
    skip_tests: bool = False
    settings: str = ""
    profiles: tuple[str, ...] = ()

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"


class ReleaseContext(BaseModel):
    """What the host knows about the release being published."""

    version: str = ""
    tag_name: str = ""
    previous_version: str = ""
    release_notes: str = ""


class ExecuteRequest(BaseModel):
    hook: str                        # Hook value; unknown hooks are passed through
    config: dict[str, Any] = Field(default_factory=dict)
    context: ReleaseContext = Field(default_factory=ReleaseContext)
    dry_run: bool = False

    @field_validator("hook", mode="before")
    @classmethod
    def _hook_name(cls, v: Any) -> Any:
        return v.value if isinstance(v, Hook) else v


class ExecuteResponse(BaseModel):
    success: bool
    message: str = ""
    error: str | None = None
    outputs: dict[str, Any] = Field(default_factory=dict)


class ValidationIssue(BaseModel):
    field: str
    message: str


class ValidateResponse(BaseModel):
    """Aggregate validation result: every failing field, not just the first."""

    valid: bool = True
    errors: list[ValidationIssue] = Field(default_factory=list)

    def add_error(self, field: str, message: str) -> None:
        self.errors.append(ValidationIssue(field=field, message=message))
        self.valid = False

    def fields(self) -> list[str]:
        """Names of the fields that failed, in report order."""
        return [issue.field for issue in self.errors]


class PluginInfo(BaseModel):
    """Static metadata describing this deployer to a host."""

    name: str
    version: str
    description: str
    author: str
    hooks: list[Hook]
    config_schema: dict[str, Any]
