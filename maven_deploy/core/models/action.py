"""
Action and Receipt models — the process-execution contract.

An Action is a fully-built command: program name plus a discrete argv
list.  A Receipt is what came back.  Adapters consume Actions and
return Receipts, never exceptions, so the orchestrator has exactly one
shape of result to inspect.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


def now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class Action(BaseModel):
    """A command to run: ``command`` followed by ``args``, no shell."""

    model_config = ConfigDict(frozen=True)

    id: str                          # e.g. "maven-deploy"
    command: str                     # program name, resolved via PATH
    args: tuple[str, ...] = ()
    env: dict[str, str] = Field(default_factory=dict, repr=False)  # extra env for the child
    cwd: str | None = None

    @property
    def display(self) -> str:
        """Human-readable rendering, for logs and dry-run previews only."""
        return " ".join((self.command, *self.args))


class Receipt(BaseModel):
    """Result of running an Action.

    ``output`` holds the combined stdout/stderr of the child, verbatim,
    whether it succeeded or not.
    """

    adapter: str
    action_id: str
    status: Literal["ok", "failed"] = "ok"

    started_at: str = Field(default_factory=now_iso)
    ended_at: str = Field(default_factory=now_iso)
    duration_ms: int = 0

    output: str = ""
    error: str | None = None
    return_code: int | None = None

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @classmethod
    def success(
        cls,
        adapter: str,
        action_id: str,
        output: str = "",
        **kwargs: Any,
    ) -> Receipt:
        """Create a success receipt."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="ok",
            output=output,
            **kwargs,
        )

    @classmethod
    def failure(
        cls,
        adapter: str,
        action_id: str,
        error: str,
        output: str = "",
        **kwargs: Any,
    ) -> Receipt:
        """Create a failure receipt."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="failed",
            error=error,
            output=output,
            **kwargs,
        )
