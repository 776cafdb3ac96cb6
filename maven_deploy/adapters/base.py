"""
Adapter base — the contract between the deploy pipeline and external tools.

The pipeline never spawns processes itself.  It builds an ``Action``
and hands it to an ``Adapter``; the adapter runs it and reports a
``Receipt``.  Swapping the adapter (``MockAdapter`` in tests) is how
the pipeline is exercised without running Maven.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from maven_deploy.core.context import RunContext
from maven_deploy.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """Everything an adapter needs to run an action."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    action: Action
    run_context: RunContext = Field(default_factory=RunContext)


class Adapter(ABC):
    """Abstract base class for command runners.

    Adapters perform the side effect and return receipts.
    They NEVER raise exceptions: failures are captured in the Receipt.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g. 'process', 'mock')."""

    @abstractmethod
    def is_available(self, command: str) -> bool:
        """Whether ``command`` can be run by this adapter. Fast, never raises."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Check that the action can be run.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Run the action and return a receipt.

        MUST block until the action finishes or the run context is done,
        and MUST never raise.
        """

    def run(self, context: ExecutionContext) -> Receipt:
        """Validate, then execute. The single call the pipeline makes."""
        try:
            is_valid, error_msg = self.validate(context)
        except Exception as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Validation error: {e}",
            )
        if not is_valid:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=error_msg,
            )
        return self.execute(context)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
