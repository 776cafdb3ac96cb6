"""
Shared test fixtures and configuration.
"""

from collections.abc import Callable

import pytest

from maven_deploy.adapters.mock import MockAdapter


def static_resolver(*addresses: str) -> Callable[[str], list[str]]:
    """A resolver that answers every lookup with ``addresses``."""

    def resolve(host: str) -> list[str]:
        return list(addresses)

    return resolve


@pytest.fixture
def public_resolver() -> Callable[[str], list[str]]:
    """Resolves every host to a public address."""
    return static_resolver("93.184.216.34")


@pytest.fixture
def metadata_resolver() -> Callable[[str], list[str]]:
    """Resolves every host to the cloud metadata endpoint."""
    return static_resolver("169.254.169.254")


@pytest.fixture
def mock_runner() -> MockAdapter:
    return MockAdapter(adapter_name="mock-mvn", default_output="[INFO] BUILD SUCCESS")


@pytest.fixture
def base_config() -> dict:
    return {"group_id": "com.example", "artifact_id": "my-app"}


@pytest.fixture(autouse=True)
def _no_maven_env(monkeypatch):
    """Keep the developer's real Maven credentials out of every test."""
    monkeypatch.delenv("MAVEN_USERNAME", raising=False)
    monkeypatch.delenv("MAVEN_PASSWORD", raising=False)
