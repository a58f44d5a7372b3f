"""
backend.api.schemas.settings

Purpose:
    Schemas for the settings view (stored Gemini API key).

Notes:
    - The stored key is never returned; only `configured` and a masked form.

Created:
    2026-10-13
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ApiKeyUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    api_key: str = Field(
        ...,
        description="Gemini API key. Saved as-is (overwrites any previous key).",
        examples=["AIza..."],
    )


class ApiKeyStatus(BaseModel):
    configured: bool
    masked: str | None = None
    message: str | None = Field(default=None, description="Confirmation shown after saving.")
