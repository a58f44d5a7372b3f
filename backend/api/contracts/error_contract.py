"""
backend.api.contracts.error_contract

Purpose:
    Stable error contract for the API (codes + response model).
    Used by global exception handlers to ensure consistent client responses.

Created:
    2026-10-13
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ApiErrorCode(str, Enum):
    # Generic
    INTERNAL_ERROR = "INTERNAL_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"

    # Request guards (nothing sent to the model)
    MISSING_CREDENTIAL = "MISSING_CREDENTIAL"
    EMPTY_INPUT = "EMPTY_INPUT"

    # Generation
    GENERATION_FAILED = "GENERATION_FAILED"

    # View state machine
    REQUEST_IN_FLIGHT = "REQUEST_IN_FLIGHT"
    REQUEST_DISCARDED = "REQUEST_DISCARDED"


class ErrorResponse(BaseModel):
    request_id: str = Field(..., description="Request correlation id for debugging")
    error_code: ApiErrorCode = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable (user-facing) error message")
    details: dict[str, Any] | None = Field(default=None, description="Optional structured details")
