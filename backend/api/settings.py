# backend/api/settings.py
"""
backend.api.settings

Purpose:
    Centralized configuration for the FastAPI service.
    Keeps deployment flexible and avoids hard-coded app metadata.

Notes:
    - LLM provider/model come from the engine (DEFAULT_CONFIG + LLM_* env vars).
    - credential_file=None defers to the engine default
      (~/.stockmoney/credentials.json or $STOCKMONEY_CREDENTIAL_FILE).

Created:
    2026-10-13
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from backend.api.contracts.api_paths import ApiPaths
from stockmoney_agents import __version__ as engine_version


class Settings(BaseModel):
    service_name: str = Field(default="stockmoney-api")
    service_version: str = Field(default=engine_version)

    api_v1_prefix: str = Field(default=ApiPaths().v1_prefix)

    credential_file: str | None = Field(default=None)
    log_level: int = Field(default=logging.INFO)


def get_settings() -> Settings:
    return Settings()
