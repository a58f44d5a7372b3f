# backend/api/contracts/api_paths.py
"""
backend.api.contracts.api_paths

Purpose:
    Central definition of API route paths and versioning.
    Keeps routing stable and prevents string duplication.

Created:
    2026-10-13
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiPaths:
    v1_prefix: str = "/v1"
    health: str = "/health"
    info: str = "/info"
    screen: str = "/screen"
    analyze: str = "/analyze"
    views: str = "/views"
    view: str = "/views/{page}"
    navigation: str = "/navigation"
    api_key: str = "/settings/api-key"
    guide: str = "/guide"
