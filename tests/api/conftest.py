"""
tests.api.conftest

Shared pytest fixtures for API tests.
"""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from backend.api.main import create_app
from stockmoney_agents.contracts.errors import GenerationFailure
from stockmoney_agents.credentials.store import InMemoryCredentialStore
from stockmoney_agents.llm.mock_client import MockLLMClient

TEST_API_KEY = "AIzaTestKey0000000000xyz9"


class FailingLLMClient:
    """Fails every call the way a rejected key would."""

    def __init__(self) -> None:
        self.calls: list[dict] = []

    def generate(self, *, prompt: str, schema: Any, credential: str) -> Any:
        self.calls.append({"prompt": prompt, "schema": schema})
        raise GenerationFailure("Gemini returned HTTP 400: API key not valid")


@pytest.fixture()
def failing_llm_client() -> FailingLLMClient:
    return FailingLLMClient()


@pytest.fixture()
def llm_client() -> MockLLMClient:
    return MockLLMClient()


@pytest.fixture()
def credential_store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore(TEST_API_KEY)


@pytest.fixture()
def client_factory(credential_store, llm_client):
    """
    Factory fixture that creates a fresh TestClient.

    Defaults to a stored key and the mock model; pass overrides to vary either.
    """

    def _make(*, store: Any = None, client: Any = None) -> TestClient:
        app = create_app(
            credential_store=store if store is not None else credential_store,
            llm_client=client if client is not None else llm_client,
        )
        return TestClient(app, raise_server_exceptions=True)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    return client_factory()
