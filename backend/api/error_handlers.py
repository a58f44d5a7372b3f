"""
backend.api.error_handlers

Purpose:
    Register global exception handlers to return stable ErrorResponse objects.
    Ensures request_id is always included.

Created:
    2026-10-13
"""

from __future__ import annotations

import logging
import re
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from backend.api.contracts.error_contract import ApiErrorCode, ErrorResponse
from backend.api.errors import ApiError, api_error_from_engine
from backend.api.logging.request_context import NO_REQUEST_ID, request_id_ctx_var
from stockmoney_agents.contracts.errors import GenerationFailure, StockMoneyError

logger = logging.getLogger(__name__)

_VALUE_ERROR_PREFIX = re.compile(r"^Value error,\s*")


def _get_request_id(request: Request) -> str:
    rid = getattr(getattr(request, "state", None), "request_id", None)
    if isinstance(rid, str) and rid:
        return rid

    rid2 = request_id_ctx_var.get()
    if isinstance(rid2, str) and rid2:
        return rid2

    return NO_REQUEST_ID


def _clean_validation_errors(errors: Any) -> Any:
    """
    Clean Pydantic/FastAPI validation errors for stable client-facing responses.

    - Strip "Value error, " prefix
    - Rewrite enum messages into "Invalid <field>. Allowed values: a, b."
    - Rewrite missing required into "Missing required field: <field>."
    - Rewrite extra forbidden into "Unknown field: <field>."
    - Drop ctx entirely for minimal/stable payloads
    """
    if not isinstance(errors, list):
        return errors

    for err in errors:
        if not isinstance(err, dict):
            continue

        err_type = err.get("type")
        loc = err.get("loc", [])
        msg = err.get("msg")

        if isinstance(msg, str):
            err["msg"] = _VALUE_ERROR_PREFIX.sub("", msg)

        field_name = loc[-1] if isinstance(loc, list) and len(loc) >= 2 else None

        if err_type == "enum" and isinstance(err.get("msg"), str) and field_name:
            options = re.findall(r"'([^']+)'", err["msg"])
            if options:
                err["msg"] = f"Invalid {field_name}. Allowed values: {', '.join(options)}."

        if err_type == "missing" and field_name:
            err["msg"] = f"Missing required field: {field_name}."

        if err_type == "extra_forbidden" and field_name:
            err["msg"] = f"Unknown field: {field_name}."

        err.pop("ctx", None)

    return errors


def _error_json(request: Request, exc: ApiError) -> JSONResponse:
    payload = ErrorResponse(
        request_id=_get_request_id(request),
        error_code=exc.error_code,
        message=exc.message,
        details=exc.details,
    )
    return JSONResponse(status_code=exc.status_code, content=payload.model_dump(mode="json"))


def register_error_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers on the FastAPI app.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        safe_errors = _clean_validation_errors(jsonable_encoder(exc.errors()))
        return _error_json(
            request,
            ApiError(
                status_code=422,
                error_code=ApiErrorCode.BAD_REQUEST,
                message="Request validation failed",
                details={"errors": safe_errors},
            ),
        )

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        return _error_json(request, exc)

    @app.exception_handler(StockMoneyError)
    async def handle_engine_error(request: Request, exc: StockMoneyError) -> JSONResponse:
        if isinstance(exc, GenerationFailure):
            logger.warning("generation failed: %s", exc)
        else:
            logger.info("request rejected: %s: %s", exc.__class__.__name__, exc)
        return _error_json(request, api_error_from_engine(exc))

    @app.exception_handler(Exception)
    async def handle_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception in API request", exc_info=exc)
        return _error_json(
            request,
            ApiError(
                status_code=500,
                error_code=ApiErrorCode.INTERNAL_ERROR,
                message="Internal server error",
            ),
        )
