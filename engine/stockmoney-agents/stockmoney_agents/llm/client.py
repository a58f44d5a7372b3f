"""
stockmoney_agents.llm.client

Purpose:
    Generation client layer: send (prompt, response schema, credential) to a hosted model
    and return the parsed JSON document.

Design Goals:
    - Stable interface used by the rest of the codebase (LLMClient Protocol).
    - Extensible provider registry to avoid scattered provider conditionals.
    - Centralized, validated runtime configuration (env overrides DEFAULT_CONFIG; fail fast
      on invalid values).
    - One blocking call per invocation. No streaming, no retry, no schema repair.
    - The credential travels per call (user-supplied key), never in the client config.

Providers:
    - Gemini REST (httpx) - default
    - Gemini via google-genai SDK, separate module that self-registers
    - Mock (canned payloads), separate module that self-registers
    - Stub (always fails)

Created:
    2026-10-12
"""

from __future__ import annotations

import copy
import importlib
import json
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Protocol

import httpx

from stockmoney_agents.config.default_config import DEFAULT_CONFIG
from stockmoney_agents.contracts.errors import GenerationFailure
from stockmoney_agents.llm.providers import LLMProvider
from stockmoney_agents.schema.nodes import SchemaNode
from stockmoney_agents.utils.logging import get_logger

logger = get_logger(__name__)

# ----------------------------
# Environment variable constants
# ----------------------------
ENV_LLM_PROVIDER = "LLM_PROVIDER"
ENV_LLM_MODEL_IDENTIFIER = "LLM_MODEL_IDENTIFIER"
ENV_LLM_BASE_URL = "LLM_BASE_URL"
ENV_LLM_TIMEOUT_SECONDS = "LLM_TIMEOUT_SECONDS"
ENV_LLM_TRACE_ENABLED = "LLM_TRACE_ENABLED"

TRACE_ENABLED_VALUE = "1"

RESPONSE_MIME_TYPE = "application/json"
GEMINI_API_KEY_HEADER = "x-goog-api-key"

# Standardized debug marker (provider-agnostic)
LLM_DEBUG_MARKER = "[LLMClient]"

_RAW_PREVIEW_CHARS = 300


def parse_json_text(text: str | None, *, source: str) -> Any:
    """
    Parse a model's response text as one JSON document.

    The response MIME type is JSON, so the whole (stripped) text must parse; nothing is
    extracted or repaired.
    """
    s = (text or "").strip()
    if not s:
        raise GenerationFailure(f"{source} returned an empty response")
    try:
        return json.loads(s)
    except json.JSONDecodeError as e:
        raise GenerationFailure(
            f"{source} returned non-JSON text: {e}. Raw (truncated): {s[:_RAW_PREVIEW_CHARS]}"
        ) from e


class LLMClient(Protocol):
    def generate(self, *, prompt: str, schema: SchemaNode, credential: str) -> Any: ...


@dataclass(frozen=True)
class LLMRuntimeConfig:
    """
    Runtime configuration for LLM selection and invocation.

    Notes:
        - timeout_seconds=None means no deadline (transport waits indefinitely).
        - Never holds the credential.
    """

    provider: LLMProvider
    model_identifier: str | None
    base_url: str | None
    timeout_seconds: float | None
    trace_enabled: bool

    @staticmethod
    def from_config(config: Mapping[str, Any]) -> "LLMRuntimeConfig":
        llm_block = config.get("llm") or {}

        provider_raw = str(llm_block.get("provider") or "").strip().lower()
        if not provider_raw:
            raise ValueError("llm.provider must be set")
        try:
            provider = LLMProvider(provider_raw)
        except ValueError as e:
            raise ValueError(f"Unsupported llm.provider value: {provider_raw}") from e

        model_identifier = str(llm_block.get("model") or "").strip() or None
        if provider in (LLMProvider.GEMINI, LLMProvider.GENAI) and not model_identifier:
            raise ValueError(f"llm.model must be set for provider={provider.value}")

        timeout_raw = llm_block.get("timeout_s")
        timeout_seconds = None if timeout_raw in (None, "") else float(timeout_raw)
        if timeout_seconds is not None and timeout_seconds <= 0:
            raise ValueError(f"llm.timeout_s must be positive, got {timeout_seconds}")

        return LLMRuntimeConfig(
            provider=provider,
            model_identifier=model_identifier,
            base_url=(str(llm_block.get("base_url") or "").strip().rstrip("/") or None),
            timeout_seconds=timeout_seconds,
            trace_enabled=bool(llm_block.get("trace")),
        )

    @staticmethod
    def from_env(config: Mapping[str, Any] | None = None) -> "LLMRuntimeConfig":
        """
        Build from `config` (default: DEFAULT_CONFIG) with LLM_* environment overrides applied.
        """
        cfg = copy.deepcopy(dict(config if config is not None else DEFAULT_CONFIG))
        llm_block = cfg.setdefault("llm", {})

        env_overrides = {
            "provider": os.getenv(ENV_LLM_PROVIDER),
            "model": os.getenv(ENV_LLM_MODEL_IDENTIFIER),
            "base_url": os.getenv(ENV_LLM_BASE_URL),
            "timeout_s": os.getenv(ENV_LLM_TIMEOUT_SECONDS),
        }
        for key, raw in env_overrides.items():
            if raw is not None and raw.strip():
                llm_block[key] = raw.strip()

        trace_raw = os.getenv(ENV_LLM_TRACE_ENABLED)
        if trace_raw is not None and trace_raw.strip():
            llm_block["trace"] = trace_raw.strip() == TRACE_ENABLED_VALUE

        return LLMRuntimeConfig.from_config(cfg)


ProviderBuilder = Callable[[LLMRuntimeConfig], LLMClient]
_PROVIDER_REGISTRY: Dict[LLMProvider, ProviderBuilder] = {}

_PROVIDER_MODULES: Dict[LLMProvider, str] = {
    # Providers that self-register on import:
    LLMProvider.GENAI: "stockmoney_agents.llm.genai_client",
    LLMProvider.MOCK: "stockmoney_agents.llm.mock_client",
}


def register_llm_provider(provider: LLMProvider, builder: ProviderBuilder) -> None:
    """
    Register a provider builder. Providers should register themselves on import.
    """
    _PROVIDER_REGISTRY[provider] = builder


def _ensure_provider_registered(provider: LLMProvider) -> None:
    if provider in _PROVIDER_REGISTRY:
        return

    module_path = _PROVIDER_MODULES.get(provider)
    if not module_path:
        return

    importlib.import_module(module_path)


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text[:_RAW_PREVIEW_CHARS]
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return json.dumps(payload, ensure_ascii=False)[:_RAW_PREVIEW_CHARS]


def _candidate_text(payload: Any) -> str:
    """
    Concatenate the text parts of the first candidate of a generateContent response.
    """
    if not isinstance(payload, dict):
        raise GenerationFailure(f"Gemini response is not an object: {type(payload).__name__}")

    candidates = payload.get("candidates") or []
    if not candidates:
        feedback = payload.get("promptFeedback")
        block_reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
        raise GenerationFailure(f"Gemini returned no candidates (blockReason={block_reason})")
    if not isinstance(candidates, list):
        raise GenerationFailure(f"Gemini candidates is not a list: {type(candidates).__name__}")

    candidate = candidates[0]
    if not isinstance(candidate, dict):
        raise GenerationFailure(f"Gemini candidate is not an object: {type(candidate).__name__}")

    content = candidate.get("content") or {}
    if not isinstance(content, dict):
        raise GenerationFailure(f"Gemini candidate content is not an object: {type(content).__name__}")

    parts = content.get("parts") or []
    if not isinstance(parts, list):
        raise GenerationFailure(f"Gemini content parts is not a list: {type(parts).__name__}")
    return "".join(
        part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str)
    )


@dataclass
class GeminiClient:
    """
    Gemini `generateContent` over REST with a JSON response schema.
    The API key is sent per call in the x-goog-api-key header.
    """

    model_name: str
    base_url: str
    timeout_s: float | None
    trace: bool = False
    # Injected in tests (httpx.MockTransport); None = real network transport.
    transport: httpx.BaseTransport | None = None

    def _endpoint(self) -> str:
        return f"{self.base_url}/v1beta/models/{self.model_name}:generateContent"

    def _post_generate_content(self, payload_dict: dict, credential: str) -> dict:
        try:
            with httpx.Client(timeout=self.timeout_s, transport=self.transport) as http_client:
                response = http_client.post(
                    self._endpoint(),
                    json=payload_dict,
                    headers={GEMINI_API_KEY_HEADER: credential},
                )
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise GenerationFailure(
                f"Gemini returned HTTP {e.response.status_code}: {_error_detail(e.response)}"
            ) from e
        except httpx.HTTPError as e:
            raise GenerationFailure(f"Gemini request failed: {e.__class__.__name__}: {e}") from e
        except ValueError as e:
            raise GenerationFailure(f"Gemini response body is not JSON: {e}") from e

    def generate(self, *, prompt: str, schema: SchemaNode, credential: str) -> Any:
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": RESPONSE_MIME_TYPE,
                "responseSchema": schema.to_gemini(),
            },
        }

        if self.trace:
            logger.debug(
                "%s provider=%s model=%s base_url=%s timeout_s=%s prompt_chars=%s",
                LLM_DEBUG_MARKER,
                LLMProvider.GEMINI.value,
                self.model_name,
                self.base_url,
                self.timeout_s,
                len(prompt),
            )

        body = self._post_generate_content(payload, credential)
        return parse_json_text(_candidate_text(body), source="Gemini")


@dataclass
class LocalStubLLM:
    """
    A safe fallback that never calls a model.
    """

    def generate(self, *, prompt: str, schema: SchemaNode, credential: str) -> Any:
        raise GenerationFailure("LocalStubLLM: no LLM configured")


def _build_gemini_client(cfg: LLMRuntimeConfig) -> GeminiClient:
    if not cfg.base_url:
        raise ValueError(f"llm.base_url must be set for provider={LLMProvider.GEMINI.value}")

    return GeminiClient(
        model_name=cfg.model_identifier or "",
        base_url=cfg.base_url,
        timeout_s=cfg.timeout_seconds,
        trace=cfg.trace_enabled,
    )


register_llm_provider(LLMProvider.GEMINI, _build_gemini_client)
register_llm_provider(LLMProvider.STUB, lambda cfg: LocalStubLLM())


def build_llm_client_from_config(runtime_config: LLMRuntimeConfig) -> LLMClient:
    """
    Construct an LLM client using a provided runtime config and provider registry.
    """
    _ensure_provider_registered(runtime_config.provider)

    builder = _PROVIDER_REGISTRY.get(runtime_config.provider)
    if not builder:
        raise ValueError(f"No provider registered for provider={runtime_config.provider.value}")

    return builder(runtime_config)


def build_llm_client_from_env() -> LLMClient:
    return build_llm_client_from_config(LLMRuntimeConfig.from_env())
