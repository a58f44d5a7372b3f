"""
backend.api.contracts.api_tags

Purpose:
    Central definition of FastAPI tags to avoid scattered string literals.

Created:
    2026-10-13
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiTags:
    health: str = "health"
    info: str = "info"
    screening: str = "screening"
    analysis: str = "analysis"
    views: str = "views"
    settings: str = "settings"
    guide: str = "guide"
