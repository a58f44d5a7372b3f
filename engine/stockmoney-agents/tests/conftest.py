"""
engine.stockmoney-agents.tests.conftest

Purpose:
    Local pytest fixtures for stockmoney-agents engine tests.
    Keeps fixtures discoverable when running pytest from the monorepo root.

Created:
    2026-10-14
"""

from __future__ import annotations

import copy
import json
from typing import Any, List

import pytest

from stockmoney_agents.credentials.store import InMemoryCredentialStore
from stockmoney_agents.llm.client import ENV_LLM_BASE_URL, ENV_LLM_MODEL_IDENTIFIER, ENV_LLM_PROVIDER
from stockmoney_agents.llm.client import ENV_LLM_TIMEOUT_SECONDS, ENV_LLM_TRACE_ENABLED
from stockmoney_agents.llm.mock_client import MOCK_ANALYSIS_PAYLOAD, MockLLMClient

API_KEY = "AIzaSyTestKey1234abcd"


class CannedLLMClient:
    """Returns a fixed payload (or raises) and records every call."""

    def __init__(self, payload: Any = None, error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.calls: List[dict] = []

    def generate(self, *, prompt: str, schema: Any, credential: str) -> Any:
        self.calls.append({"prompt": prompt, "schema": schema, "credential": credential})
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.payload)


@pytest.fixture(autouse=True)
def _clean_llm_env(monkeypatch):
    for name in (
        ENV_LLM_PROVIDER,
        ENV_LLM_MODEL_IDENTIFIER,
        ENV_LLM_BASE_URL,
        ENV_LLM_TIMEOUT_SECONDS,
        ENV_LLM_TRACE_ENABLED,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore(API_KEY)


@pytest.fixture()
def empty_store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture()
def mock_client() -> MockLLMClient:
    return MockLLMClient()


@pytest.fixture()
def canned_client():
    return CannedLLMClient


@pytest.fixture()
def analysis_payload() -> dict:
    return json.loads(json.dumps(MOCK_ANALYSIS_PAYLOAD))
