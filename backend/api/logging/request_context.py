"""
backend.api.logging.request_context

Purpose:
    Request-scoped correlation id (contextvars) and the logging filter that stamps it
    onto every record, so engine logs emitted while serving a request carry request_id.

Created:
    2026-10-13
"""

from __future__ import annotations

import contextvars
import logging

NO_REQUEST_ID = "-"

request_id_ctx_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id",
    default=None,
)


def current_request_id() -> str:
    return request_id_ctx_var.get() or NO_REQUEST_ID


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = current_request_id()
        return True
