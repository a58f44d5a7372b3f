"""
Tests the google-genai provider with the SDK client patched out (no network).
"""

from types import SimpleNamespace

import pytest
from google.genai import errors as genai_errors

from stockmoney_agents.contracts.errors import GenerationFailure
from stockmoney_agents.llm import genai_client
from stockmoney_agents.llm.genai_client import GenAIClient
from stockmoney_agents.schema.response_schemas import ANALYSIS_SCHEMA


class _FakeModels:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, *, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


def _patch_sdk(monkeypatch, models):
    created = []

    def fake_client(*, api_key, http_options=None):
        created.append({"api_key": api_key, "http_options": http_options})
        return SimpleNamespace(models=models)

    monkeypatch.setattr(genai_client.genai, "Client", fake_client)
    return created


def test_generate_passes_key_schema_and_timeout(monkeypatch):
    models = _FakeModels(text='{"conclusion": "ok"}')
    created = _patch_sdk(monkeypatch, models)

    client = GenAIClient(model_name="gemini-2.5-flash", timeout_s=2.5)
    out = client.generate(prompt="p", schema=ANALYSIS_SCHEMA, credential="AIza-k")

    assert out == {"conclusion": "ok"}
    assert created[0]["api_key"] == "AIza-k"
    assert created[0]["http_options"].timeout == 2500
    config = models.calls[0]["config"]
    assert config.response_mime_type == "application/json"
    assert models.calls[0]["model"] == "gemini-2.5-flash"


def test_no_timeout_means_default_http_options(monkeypatch):
    created = _patch_sdk(monkeypatch, _FakeModels(text="[]"))
    GenAIClient(model_name="m", timeout_s=None).generate(prompt="p", schema=ANALYSIS_SCHEMA, credential="k")
    assert created[0]["http_options"] is None


def test_api_error_is_generation_failure(monkeypatch):
    error = genai_errors.ClientError(400, {"error": {"code": 400, "message": "API key not valid."}})
    _patch_sdk(monkeypatch, _FakeModels(error=error))

    with pytest.raises(GenerationFailure) as exc:
        GenAIClient(model_name="m", timeout_s=None).generate(
            prompt="p", schema=ANALYSIS_SCHEMA, credential="bad"
        )
    assert "HTTP 400" in str(exc.value)


def test_empty_text_is_generation_failure(monkeypatch):
    _patch_sdk(monkeypatch, _FakeModels(text=None))
    with pytest.raises(GenerationFailure):
        GenAIClient(model_name="m", timeout_s=None).generate(
            prompt="p", schema=ANALYSIS_SCHEMA, credential="k"
        )
