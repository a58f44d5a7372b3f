"""
backend.api.dependencies

Purpose:
    FastAPI dependencies exposing the process-wide objects created in create_app().

Created:
    2026-10-13
"""

from __future__ import annotations

from fastapi import Request

from stockmoney_agents.credentials.store import CredentialStore
from stockmoney_agents.session.view_state import ViewRegistry


def get_views(request: Request) -> ViewRegistry:
    return request.app.state.views


def get_credential_store(request: Request) -> CredentialStore:
    return request.app.state.credential_store
