"""
backend.api.routes.v1.guide

Purpose:
    Static usage instructions (training view), settings steps and footer disclaimer.

Created:
    2026-10-13
"""

from __future__ import annotations

from fastapi import APIRouter

from backend.api.contracts.api_paths import ApiPaths
from backend.api.contracts.api_tags import ApiTags
from stockmoney_agents.content.guide import USAGE_GUIDE, Guide

_paths = ApiPaths()

router = APIRouter(tags=[ApiTags().guide])


@router.get(_paths.guide, response_model=Guide)
def guide() -> Guide:
    return USAGE_GUIDE
