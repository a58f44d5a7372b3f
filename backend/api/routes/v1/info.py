"""
backend.api.routes.v1.info

Purpose:
    Versioned info endpoint that exposes API metadata and supported options
    for client discovery (views/providers/etc).

Created:
    2026-10-13
"""

from __future__ import annotations

from fastapi import APIRouter

from backend.api.contracts.api_paths import ApiPaths
from backend.api.contracts.api_tags import ApiTags
from backend.api.settings import get_settings
from stockmoney_agents.contracts.enums import Page
from stockmoney_agents.llm.providers import LLMProvider

_paths = ApiPaths()

router = APIRouter(tags=[ApiTags().info])


def _v1(path: str) -> str:
    return f"{_paths.v1_prefix}{path}"


@router.get(_paths.info)
def info() -> dict:
    settings = get_settings()

    # Stable contract; safe for clients to depend on.
    return {
        "api_version": "v1",
        "service": settings.service_name,
        "version": settings.service_version,
        "endpoints": {
            "health": _v1(_paths.health),
            "screen": _v1(_paths.screen),
            "analyze": _v1(_paths.analyze),
            "view": _v1(_paths.view),
            "navigation": _v1(_paths.navigation),
            "api_key": _v1(_paths.api_key),
            "guide": _v1(_paths.guide),
        },
        "supported": {
            "views": [p.value for p in Page],
            "providers": [p.value for p in LLMProvider],
        },
    }
