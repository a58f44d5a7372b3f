"""
backend.api.errors

Purpose:
    Internal exception types for API error handling.
    Routes raise ApiError (or let engine StockMoneyError propagate);
    global handlers convert both to ErrorResponse.

Created:
    2026-10-13
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from backend.api.contracts.error_contract import ApiErrorCode
from stockmoney_agents.contracts.errors import (
    EmptyInput,
    GenerationFailure,
    MissingCredential,
    RequestDiscarded,
    RequestInFlight,
    StockMoneyError,
)


@dataclass(frozen=True)
class ApiError(Exception):
    status_code: int
    error_code: ApiErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"


# Engine error -> (HTTP status, error code). Checked in order; first isinstance match wins.
_ENGINE_ERROR_MAP: tuple[tuple[type[StockMoneyError], int, ApiErrorCode], ...] = (
    (MissingCredential, 400, ApiErrorCode.MISSING_CREDENTIAL),
    (EmptyInput, 400, ApiErrorCode.EMPTY_INPUT),
    (GenerationFailure, 502, ApiErrorCode.GENERATION_FAILED),
    (RequestInFlight, 409, ApiErrorCode.REQUEST_IN_FLIGHT),
    (RequestDiscarded, 409, ApiErrorCode.REQUEST_DISCARDED),
)


def api_error_from_engine(exc: StockMoneyError) -> ApiError:
    for error_type, status_code, error_code in _ENGINE_ERROR_MAP:
        if isinstance(exc, error_type):
            return ApiError(
                status_code=status_code,
                error_code=error_code,
                message=exc.user_message,
                details={"error": exc.__class__.__name__},
            )

    return ApiError(
        status_code=500,
        error_code=ApiErrorCode.INTERNAL_ERROR,
        message=exc.user_message,
        details={"error": exc.__class__.__name__},
    )
