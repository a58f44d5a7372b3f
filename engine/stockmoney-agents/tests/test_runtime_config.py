"""
Purpose:
- LLM runtime config: defaults, env overrides, fail-fast validation, provider registry.
"""

import pytest

from stockmoney_agents.config.default_config import DEFAULT_CONFIG
from stockmoney_agents.llm.client import (
    GeminiClient,
    LLMRuntimeConfig,
    LocalStubLLM,
    build_llm_client_from_config,
    build_llm_client_from_env,
)
from stockmoney_agents.llm.mock_client import MockLLMClient
from stockmoney_agents.llm.providers import LLMProvider


def test_defaults():
    cfg = LLMRuntimeConfig.from_env()
    assert cfg.provider is LLMProvider.GEMINI
    assert cfg.model_identifier == "gemini-2.5-flash"
    assert cfg.base_url == "https://generativelanguage.googleapis.com"
    assert cfg.timeout_seconds is None
    assert cfg.trace_enabled is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LLM_PROVIDER", "MOCK")
    monkeypatch.setenv("LLM_MODEL_IDENTIFIER", "gemini-test")
    monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("LLM_TRACE_ENABLED", "1")

    cfg = LLMRuntimeConfig.from_env()
    assert cfg.provider is LLMProvider.MOCK
    assert cfg.model_identifier == "gemini-test"
    assert cfg.timeout_seconds == 12.5
    assert cfg.trace_enabled is True


def test_env_does_not_mutate_default_config(monkeypatch):
    monkeypatch.setenv("LLM_MODEL_IDENTIFIER", "other-model")
    LLMRuntimeConfig.from_env()
    assert DEFAULT_CONFIG["llm"]["model"] == "gemini-2.5-flash"


def test_unsupported_provider_fails_fast(monkeypatch):
    monkeypatch.setenv("LLM_PROVIDER", "ollama")
    with pytest.raises(ValueError, match="Unsupported llm.provider"):
        LLMRuntimeConfig.from_env()


@pytest.mark.parametrize("raw", ["0", "-3"])
def test_non_positive_timeout_fails_fast(monkeypatch, raw):
    monkeypatch.setenv("LLM_TIMEOUT_SECONDS", raw)
    with pytest.raises(ValueError):
        LLMRuntimeConfig.from_env()


def test_gemini_requires_model():
    with pytest.raises(ValueError):
        LLMRuntimeConfig.from_config({"llm": {"provider": "gemini", "model": ""}})


def test_registry_builds_each_provider(monkeypatch):
    assert isinstance(build_llm_client_from_env(), GeminiClient)

    monkeypatch.setenv("LLM_PROVIDER", "mock")
    assert isinstance(build_llm_client_from_env(), MockLLMClient)

    stub = build_llm_client_from_config(LLMRuntimeConfig.from_config({"llm": {"provider": "stub"}}))
    assert isinstance(stub, LocalStubLLM)
