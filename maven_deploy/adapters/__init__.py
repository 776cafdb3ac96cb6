"""Adapters — command runners for external tools.

Public re-exports for convenient access.
"""

from maven_deploy.adapters.base import Adapter, ExecutionContext
from maven_deploy.adapters.mock import MockAdapter
from maven_deploy.adapters.shell.command import ProcessAdapter

__all__ = [
    "Adapter",
    "ExecutionContext",
    "MockAdapter",
    "ProcessAdapter",
]
