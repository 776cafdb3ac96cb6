"""
Process adapter — run a command as a child process, argv only.

Commands are started with ``shell=False`` and an explicit argument
list, so no token is ever interpreted by a shell.  stdout and stderr
are merged into a single captured stream.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import time
from pathlib import Path

from maven_deploy.adapters.base import Adapter, ExecutionContext
from maven_deploy.core.models.action import Receipt, now_iso

logger = logging.getLogger(__name__)


class ProcessAdapter(Adapter):
    """Run an ``Action`` with ``subprocess.Popen`` and capture its output.

    The child is polled every ``poll_interval`` seconds.  When the run
    context is cancelled or its deadline passes, the child is killed and
    a failure receipt carrying the partial output is returned.
    """

    def __init__(self, poll_interval: float = 0.2):
        self._poll_interval = poll_interval

    @property
    def name(self) -> str:
        return "process"

    def is_available(self, command: str) -> bool:
        return shutil.which(command) is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        action = context.action
        if not action.command:
            return False, "Missing command"
        if not self.is_available(action.command):
            return False, f"{action.command}: executable not found in PATH"
        if action.cwd and not Path(action.cwd).is_dir():
            return False, f"Working directory does not exist: {action.cwd}"
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        action = context.action
        run_ctx = context.run_context
        argv = [action.command, *action.args]

        if run_ctx.done:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"{action.command} cancelled before start",
                metadata={"cancelled": True},
            )

        logger.debug("Executing: %s (cwd=%s)", action.display, action.cwd or ".")
        start = time.monotonic()
        started_at = now_iso()

        try:
            proc = subprocess.Popen(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                stdin=subprocess.DEVNULL,
                text=True,
                cwd=action.cwd,
                env={**os.environ, **action.env},
            )
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"failed to start {action.command}: {e}",
                started_at=started_at,
            )

        output = ""
        while True:
            if run_ctx.done:
                reason = "cancelled" if run_ctx.cancelled else "deadline exceeded"
                output = self._kill(proc)
                logger.warning("%s %s; killed pid %d", action.command, reason, proc.pid)
                return Receipt.failure(
                    adapter=self.name,
                    action_id=action.id,
                    error=f"{action.command} {reason}",
                    output=output,
                    started_at=started_at,
                    ended_at=now_iso(),
                    duration_ms=int((time.monotonic() - start) * 1000),
                    metadata={"cancelled": True, "reason": reason},
                )
            try:
                output, _ = proc.communicate(timeout=self._poll_interval)
                break
            except subprocess.TimeoutExpired:
                continue

        elapsed_ms = int((time.monotonic() - start) * 1000)
        ended_at = now_iso()
        output = output or ""

        if proc.returncode == 0:
            return Receipt.success(
                adapter=self.name,
                action_id=action.id,
                output=output,
                return_code=0,
                duration_ms=elapsed_ms,
                started_at=started_at,
                ended_at=ended_at,
            )
        return Receipt.failure(
            adapter=self.name,
            action_id=action.id,
            error=f"exit status {proc.returncode}",
            output=output,
            return_code=proc.returncode,
            duration_ms=elapsed_ms,
            started_at=started_at,
            ended_at=ended_at,
        )

    @staticmethod
    def _kill(proc: subprocess.Popen) -> str:
        """Kill the child and collect whatever it printed."""
        proc.kill()
        try:
            output, _ = proc.communicate(timeout=5)
        except subprocess.TimeoutExpired:
            return ""
        return output or ""
