"""
Run context — deadline and cancellation for one deploy invocation.

A ``RunContext`` is created per call and handed down to the blocking
operations (DNS resolution, the external process).  It carries no
shared state between invocations:

    ctx = RunContext.with_timeout(600)
    ...
    ctx.cancel()            # from another thread, e.g. a signal handler

Blocking code polls ``done`` and ``remaining()``; whoever owns the
child process is responsible for killing it once the context is done.
"""

from __future__ import annotations

import threading
import time


class RunContext:
    """Cancellable, optionally deadline-bound execution context."""

    def __init__(self, deadline: float | None = None):
        self.deadline = deadline      # time.monotonic() value, None = no deadline
        self._cancelled = threading.Event()

    @classmethod
    def with_timeout(cls, seconds: float | None) -> RunContext:
        """Create a context that expires ``seconds`` from now (None = never)."""
        if seconds is None:
            return cls()
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    @property
    def done(self) -> bool:
        """Whether work under this context must stop."""
        return self.cancelled or self.expired

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None if unbounded."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def wait(self, seconds: float) -> bool:
        """Sleep up to ``seconds``, waking early on cancel. Returns ``cancelled``."""
        return self._cancelled.wait(seconds)

    def __repr__(self) -> str:
        return f"RunContext(remaining={self.remaining()!r}, cancelled={self.cancelled})"
