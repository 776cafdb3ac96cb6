"""
Deploy use case — validate, build, then preview or run ``mvn deploy``.

This is the top-level orchestrator for the post-publish hook:

    Idle → Validating → Rejected
                      → Building → BuildFailed
                                 → Ready → Previewed | Executed | ExecutionFailed

A cancelled or expired run context moves any stage to Cancelled.

Validation here is fail-fast: the first bad field ends the run.  For
an exhaustive report of every bad field, use ``validate_config``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from maven_deploy.adapters.base import Adapter, ExecutionContext
from maven_deploy.adapters.shell.command import ProcessAdapter
from maven_deploy.core.config.parser import PASSWORD_ENV, USERNAME_ENV, parse_config
from maven_deploy.core.context import RunContext
from maven_deploy.core.errors import BuildError, ExecutionError, ValidationError
from maven_deploy.core.models.action import Action, Receipt
from maven_deploy.core.models.deploy import (
    DeployConfig,
    ExecuteRequest,
    ExecuteResponse,
    Hook,
    ReleaseContext,
)
from maven_deploy.core.security.network import Resolver, validate_repository_url
from maven_deploy.core.security.validators import validate_coordinate
from maven_deploy.core.services.command_builder import (
    MAVEN_CLI,
    build_maven_command,
    render_command,
)

logger = logging.getLogger(__name__)

DEPLOY_ACTION_ID = "maven-deploy"


class DeployState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    REJECTED = "rejected"
    BUILDING = "building"
    BUILD_FAILED = "build_failed"
    READY = "ready"
    PREVIEWED = "previewed"
    EXECUTED = "executed"
    EXECUTION_FAILED = "execution_failed"
    CANCELLED = "cancelled"


@dataclass
class DeployResult:
    """Outcome of one deploy attempt, including where it stopped."""

    config: DeployConfig
    state: DeployState = DeployState.IDLE
    args: list[str] = field(default_factory=list)
    receipt: Receipt | None = None
    response: ExecuteResponse | None = None

    def transition(self, state: DeployState) -> None:
        logger.debug("deploy %s: %s -> %s", self.config.coordinates, self.state.value, state.value)
        self.state = state

    def fail(self, state: DeployState, error: str) -> DeployResult:
        self.transition(state)
        self.response = ExecuteResponse(success=False, error=error)
        return self


def execute(
    request: ExecuteRequest,
    *,
    runner: Adapter | None = None,
    context: RunContext | None = None,
    resolver: Resolver | None = None,
    environ: Mapping[str, str] | None = None,
) -> ExecuteResponse:
    """Handle a hook invocation from the host.

    Only ``post-publish`` does anything; every other hook is acknowledged
    as a no-op.  Never raises for bad configuration: failures come back
    as ``success=False`` with the first error.
    """
    if request.hook != Hook.POST_PUBLISH:
        return ExecuteResponse(success=True, message=f"Hook {request.hook} not handled")

    config = parse_config(request.config, environ)
    result = deploy(
        config,
        request.context,
        dry_run=request.dry_run,
        runner=runner,
        context=context,
        resolver=resolver,
    )
    assert result.response is not None  # set on every exit path
    return result.response


def deploy(
    config: DeployConfig,
    release: ReleaseContext,
    *,
    dry_run: bool = False,
    runner: Adapter | None = None,
    context: RunContext | None = None,
    resolver: Resolver | None = None,
) -> DeployResult:
    """Run the deploy state machine for an already-parsed config.

    Args:
        config: The deploy configuration.
        release: Release information; only ``version`` is used.
        dry_run: If True, stop after building and report the command.
        runner: Command runner. Defaults to a real ``ProcessAdapter``.
        context: Deadline/cancellation for DNS and the Maven process.
        resolver: Override for repository host resolution (tests).

    Returns:
        DeployResult whose ``response`` is always set.
    """
    result = DeployResult(config=config)
    run_context = context or RunContext()

    if run_context.done:
        return result.fail(DeployState.CANCELLED, _cancelled_message(run_context))

    # ── Validating ───────────────────────────────────────────────
    result.transition(DeployState.VALIDATING)
    try:
        validate_coordinate(config.group_id, "group_id")
        validate_coordinate(config.artifact_id, "artifact_id")
    except ValidationError as e:
        logger.info("Rejected deploy config: %s", e)
        return result.fail(DeployState.REJECTED, str(e))

    try:
        validate_repository_url(config.repository, resolver=resolver, context=run_context)
    except ValidationError as e:
        if run_context.done:
            return result.fail(DeployState.CANCELLED, f"invalid repository URL: {e}")
        logger.info("Rejected repository URL: %s", e)
        return result.fail(DeployState.REJECTED, f"invalid repository URL: {e}")

    # ── Building ─────────────────────────────────────────────────
    result.transition(DeployState.BUILDING)
    try:
        result.args = build_maven_command(config)
    except BuildError as e:
        logger.info("Command build failed: %s", e)
        return result.fail(DeployState.BUILD_FAILED, str(e))

    if run_context.done:
        return result.fail(DeployState.CANCELLED, _cancelled_message(run_context))

    result.transition(DeployState.READY)
    version = release.version

    if dry_run:
        result.transition(DeployState.PREVIEWED)
        result.response = ExecuteResponse(
            success=True,
            message="Would deploy Maven artifact",
            outputs={
                "group_id": config.group_id,
                "artifact_id": config.artifact_id,
                "version": version,
                "pom_path": config.pom_path,
                "command": render_command(result.args),
                "skip_tests": config.skip_tests,
                "profiles": list(config.profiles),
            },
        )
        return result

    # ── Executing ────────────────────────────────────────────────
    action = Action(
        id=DEPLOY_ACTION_ID,
        command=MAVEN_CLI,
        args=tuple(result.args),
        env=_credential_env(config),
    )
    runner = runner or ProcessAdapter()
    logger.info("Deploying %s:%s via %s", config.coordinates, version, runner.name)

    receipt = runner.run(ExecutionContext(action=action, run_context=run_context))
    result.receipt = receipt

    if not receipt.ok:
        error = ExecutionError(f"Maven deploy failed: {receipt.error}", receipt.output)
        logger.error("Maven deploy of %s failed: %s", config.coordinates, receipt.error)
        return result.fail(DeployState.EXECUTION_FAILED, str(error))

    result.transition(DeployState.EXECUTED)
    result.response = ExecuteResponse(
        success=True,
        message=f"Deployed Maven artifact {config.coordinates}:{version}",
        outputs={
            "group_id": config.group_id,
            "artifact_id": config.artifact_id,
            "version": version,
        },
    )
    return result


def _credential_env(config: DeployConfig) -> dict[str, str]:
    """Credentials for the child's environment. Never put on argv."""
    env = {}
    if config.username:
        env[USERNAME_ENV] = config.username
    if config.password:
        env[PASSWORD_ENV] = config.password
    return env


def _cancelled_message(context: RunContext) -> str:
    reason = "cancelled" if context.cancelled else "deadline exceeded"
    return f"Maven deploy {reason} before mvn was started"
