"""
stockmoney_agents.llm.genai_client

Purpose:
    Gemini provider implemented with the official google-genai SDK.

Design Notes:
    - Provider registers itself into stockmoney_agents.llm.client registry on import.
    - A genai.Client is created per call because the API key is supplied per call
      (the user may change it in settings between requests).
    - Same contract as GeminiClient: parsed JSON or GenerationFailure.

Created:
    2026-10-13
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from stockmoney_agents.contracts.errors import GenerationFailure
from stockmoney_agents.llm.client import (
    LLM_DEBUG_MARKER,
    RESPONSE_MIME_TYPE,
    LLMProvider,
    LLMRuntimeConfig,
    parse_json_text,
    register_llm_provider,
)
from stockmoney_agents.schema.nodes import SchemaNode
from stockmoney_agents.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class GenAIClient:
    model_name: str
    timeout_s: float | None
    trace: bool = False

    def _http_options(self) -> types.HttpOptions | None:
        if self.timeout_s is None:
            return None
        # HttpOptions.timeout is in milliseconds.
        return types.HttpOptions(timeout=int(self.timeout_s * 1000))

    def generate(self, *, prompt: str, schema: SchemaNode, credential: str) -> Any:
        if self.trace:
            logger.debug(
                "%s provider=%s model=%s timeout_s=%s prompt_chars=%s",
                LLM_DEBUG_MARKER,
                LLMProvider.GENAI.value,
                self.model_name,
                self.timeout_s,
                len(prompt),
            )

        try:
            client = genai.Client(api_key=credential, http_options=self._http_options())
            response = client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type=RESPONSE_MIME_TYPE,
                    response_schema=schema.to_gemini(),
                ),
            )
        except genai_errors.APIError as e:
            raise GenerationFailure(f"google-genai returned HTTP {e.code}: {e.message}") from e
        except httpx.HTTPError as e:
            raise GenerationFailure(f"google-genai request failed: {e.__class__.__name__}: {e}") from e

        return parse_json_text(response.text, source="google-genai")


def _build_genai_client(runtime_config: LLMRuntimeConfig) -> GenAIClient:
    return GenAIClient(
        model_name=runtime_config.model_identifier or "",
        timeout_s=runtime_config.timeout_seconds,
        trace=runtime_config.trace_enabled,
    )


register_llm_provider(LLMProvider.GENAI, _build_genai_client)
