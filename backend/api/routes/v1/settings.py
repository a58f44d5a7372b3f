"""
backend.api.routes.v1.settings

Purpose:
    Settings view: read the credential status, save a new Gemini API key.

Notes:
    - Only a masked key is ever returned or logged.
    - The key is stored as given; a blank key behaves like no key at request time.

Created:
    2026-10-13
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from backend.api.contracts.api_paths import ApiPaths
from backend.api.contracts.api_tags import ApiTags
from backend.api.dependencies import get_credential_store
from backend.api.schemas.settings import ApiKeyStatus, ApiKeyUpdate
from stockmoney_agents.content.guide import API_KEY_SAVED_MESSAGE
from stockmoney_agents.credentials.store import CredentialStore
from stockmoney_agents.utils.logging import mask_secret

logger = logging.getLogger(__name__)

_paths = ApiPaths()

router = APIRouter(tags=[ApiTags().settings])


def _status(store: CredentialStore, message: str | None = None) -> ApiKeyStatus:
    value = (store.get() or "").strip()
    return ApiKeyStatus(
        configured=bool(value),
        masked=mask_secret(value) if value else None,
        message=message,
    )


@router.get(_paths.api_key, response_model=ApiKeyStatus)
def get_api_key(store: CredentialStore = Depends(get_credential_store)) -> ApiKeyStatus:
    return _status(store)


@router.put(_paths.api_key, response_model=ApiKeyStatus)
def put_api_key(
    body: ApiKeyUpdate, store: CredentialStore = Depends(get_credential_store)
) -> ApiKeyStatus:
    store.set(body.api_key)
    logger.info("api key saved masked=%s", mask_secret(body.api_key.strip()))
    return _status(store, API_KEY_SAVED_MESSAGE)
