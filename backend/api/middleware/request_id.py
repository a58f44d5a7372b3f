"""
backend.api.middleware.request_id

Purpose:
    Middleware that ensures each request has a request-id and propagates it to
    responses and to the logging context.

Created:
    2026-10-13
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from backend.api.logging.request_context import request_id_ctx_var


@dataclass(frozen=True)
class RequestIdPolicy:
    """Header names: incoming request/correlation id, and the echoed response header."""

    request_id_header: str = "X-Request-Id"
    correlation_id_header: str = "X-Correlation-Id"
    response_header: str = "X-Request-Id"


class RequestIdMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, policy: RequestIdPolicy | None = None) -> None:
        super().__init__(app)
        self._policy = policy or RequestIdPolicy()

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        policy = self._policy

        request_id = (
            request.headers.get(policy.request_id_header)
            or request.headers.get(policy.correlation_id_header)
            or uuid.uuid4().hex
        )

        request.state.request_id = request_id
        token = request_id_ctx_var.set(request_id)
        try:
            response: Response = await call_next(request)
        finally:
            request_id_ctx_var.reset(token)

        response.headers[policy.response_header] = request_id
        return response
