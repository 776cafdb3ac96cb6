"""
Domain models — Pydantic types for the deployer.

All models are re-exported here for convenient access:

    from maven_deploy.core.models import DeployConfig, ExecuteResponse, Receipt
"""

from maven_deploy.core.models.action import Action, Receipt
from maven_deploy.core.models.deploy import (
    DEFAULT_POM_PATH,
    DeployConfig,
    ExecuteRequest,
    ExecuteResponse,
    Hook,
    PluginInfo,
    ReleaseContext,
    ValidateResponse,
    ValidationIssue,
)

__all__ = [
    # action.py
    "Action",
    "Receipt",
    # deploy.py
    "DEFAULT_POM_PATH",
    "DeployConfig",
    "ExecuteRequest",
    "ExecuteResponse",
    "Hook",
    "PluginInfo",
    "ReleaseContext",
    "ValidateResponse",
    "ValidationIssue",
]
