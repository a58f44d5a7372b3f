"""
stockmoney_agents.llm.providers

Purpose:
    Canonical LLM provider identifiers supported by the engine.
    Used by CLI + API config validation and by provider factory selection.

Created:
    2026-10-12
"""

from __future__ import annotations

from enum import Enum


class LLMProvider(str, Enum):
    STUB = "stub"
    MOCK = "mock"
    GEMINI = "gemini"
    GENAI = "genai"
