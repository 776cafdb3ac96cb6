"""
In-memory stand-in for the mvn runner.

Lets the deploy use case be exercised without a JDK or Maven on the
machine: the ``mvn deploy`` action is captured instead of spawned, and
the receipt handed back can be scripted to look like a Maven build log.
"""

from __future__ import annotations

from maven_deploy.adapters.base import Adapter, ExecutionContext
from maven_deploy.core.models.action import Receipt


class MockAdapter(Adapter):
    """Records deploy actions instead of running mvn.

    Every action that passes ``validate`` is appended to ``call_log`` so a
    test can inspect the argv and the MAVEN_USERNAME/MAVEN_PASSWORD env that
    would have reached Maven.  The receipt defaults to success with
    ``default_output``; ``set_failure("maven-deploy", ...)`` scripts a
    BUILD FAILURE for the deploy action, and ``available=False`` behaves
    like a machine with no mvn on PATH.
    """

    def __init__(
        self,
        adapter_name: str = "mock",
        available: bool = True,
        default_output: str = "[INFO] BUILD SUCCESS",
    ):
        self._name = adapter_name
        self._available = available
        self._default_output = default_output
        self._responses: dict[str, Receipt] = {}
        self._call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[ExecutionContext]:
        """Deploy actions that would have been handed to mvn, in order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def is_available(self, command: str) -> bool:
        return self._available

    def set_response(self, action_id: str, receipt: Receipt) -> None:
        """Return ``receipt`` whenever ``action_id`` runs."""
        self._responses[action_id] = receipt

    def set_failure(
        self,
        action_id: str,
        error: str = "exit status 1",
        output: str = "[ERROR] BUILD FAILURE",
    ) -> None:
        """Make ``action_id`` fail the way a non-zero mvn exit does."""
        self._responses[action_id] = Receipt.failure(
            adapter=self._name,
            action_id=action_id,
            error=error,
            output=output,
            return_code=1,
        )

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        if not self._available:
            return False, f"{context.action.command}: executable not found in PATH"
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self._call_log.append(context)

        if context.action.id in self._responses:
            return self._responses[context.action.id]

        return Receipt.success(
            adapter=self._name,
            action_id=context.action.id,
            output=self._default_output,
            return_code=0,
            metadata={"mock": True, "argv": [context.action.command, *context.action.args]},
        )

    def reset(self) -> None:
        """Forget recorded actions and scripted receipts."""
        self._call_log.clear()
        self._responses.clear()
