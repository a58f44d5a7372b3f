"""
backend.api.logging.logging_config

Purpose:
    Central logging configuration for the backend API.
    Ensures request_id is present in logs, including engine (stockmoney_agents)
    and uvicorn.access / uvicorn.error records.

Created:
    2026-10-13
"""

from __future__ import annotations

import logging

from backend.api.logging.request_context import RequestIdFilter

LOG_FORMAT = "%(asctime)s | %(levelname)s | request_id=%(request_id)s | %(name)s | %(message)s"
HANDLER_NAME = "stockmoney-api"

_OWNED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")
_QUIET_LOGGERS = ("httpx", "httpcore", "google_genai")


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    handler.set_name(HANDLER_NAME)
    return handler


def configure_logging(level: int = logging.INFO) -> None:
    handler = _make_handler(level)

    # Root/app logs (don't clear root handlers to avoid surprising other libs)
    root = logging.getLogger()
    root.setLevel(level)
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        root.addHandler(handler)

    # Uvicorn uses these loggers; clear their handlers so our formatter/filter wins.
    for name in _OWNED_LOGGERS:
        owned = logging.getLogger(name)
        owned.setLevel(level)
        owned.handlers.clear()
        owned.addHandler(handler)
        owned.propagate = False

    # Request bodies / API keys never reach our logs through client libraries.
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
