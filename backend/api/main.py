"""
backend.api.main

Purpose:
    FastAPI application entrypoint for the Stock Money AI backend API.

Notes:
    - One ViewRegistry per app: the screener/analyzer request state lives on app.state.
    - credential_store / llm_client are injectable for tests; by default the file-backed
      store and the client selected by LLM_* env vars (DEFAULT_CONFIG otherwise).

Created:
    2026-10-13
"""

from __future__ import annotations

import copy
import logging

from fastapi import FastAPI

from backend.api.error_handlers import register_error_handlers
from backend.api.logging.logging_config import configure_logging
from backend.api.middleware.request_id import RequestIdMiddleware, RequestIdPolicy
from backend.api.routes.health import router as health_router
from backend.api.routes.v1 import v1_router
from backend.api.settings import get_settings
from stockmoney_agents.config.default_config import DEFAULT_CONFIG
from stockmoney_agents.credentials.store import (
    CredentialStore,
    build_credential_store_from_config,
)
from stockmoney_agents.llm.client import LLMClient, LLMRuntimeConfig, build_llm_client_from_config
from stockmoney_agents.session.view_state import ViewRegistry

logger = logging.getLogger(__name__)


def _default_credential_store(credential_file: str | None) -> CredentialStore:
    config = copy.deepcopy(DEFAULT_CONFIG)
    if credential_file:
        config["credentials"]["file"] = credential_file
    return build_credential_store_from_config(config)


def create_app(
    *,
    credential_store: CredentialStore | None = None,
    llm_client: LLMClient | None = None,
) -> FastAPI:
    settings = get_settings()

    configure_logging(settings.log_level)

    app = FastAPI(title=settings.service_name, version=settings.service_version)

    if credential_store is None:
        credential_store = _default_credential_store(settings.credential_file)

    if llm_client is None:
        runtime = LLMRuntimeConfig.from_env()
        llm_client = build_llm_client_from_config(runtime)
        logger.info(
            "LLM client ready: provider=%s model=%s timeout_s=%s",
            runtime.provider.value,
            runtime.model_identifier,
            runtime.timeout_seconds,
        )

    app.state.credential_store = credential_store
    app.state.views = ViewRegistry(credential_store=credential_store, client=llm_client)

    @app.get("/")
    def root():
        return {"status": "ok", "service": settings.service_name}

    app.add_middleware(RequestIdMiddleware, policy=RequestIdPolicy())

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(v1_router)

    return app


app = create_app()
