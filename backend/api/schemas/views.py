"""
backend.api.schemas.views

Purpose:
    Schemas describing per-view request state and page navigation.

Created:
    2026-10-13
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from stockmoney_agents.contracts.enums import Page
from stockmoney_agents.session.view_state import ViewStatus


class ViewError(BaseModel):
    error: str
    message: str


class ViewStateResponse(BaseModel):
    page: Page
    status: ViewStatus
    is_pending: bool
    result: Any = None
    error: ViewError | None = None


class NavigationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    page: Page


class NavigationResponse(BaseModel):
    current_page: Page
