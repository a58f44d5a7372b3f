"""
backend.api.schemas.screening

Purpose:
    Request/response schemas for the /v1/screen API endpoint.

Created:
    2026-10-13
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from stockmoney_agents.contracts.reports import ScreenedStock
from stockmoney_agents.render.views import ScreeningView


class ScreenRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    criteria: str = Field(
        ...,
        description="Free-text screening criteria (quantitative, qualitative, or both).",
        examples=["市盈率低于20，连续三年营收增长超过10%的消费类公司"],
    )


class ScreenResponse(BaseModel):
    """Candidates ranked by score (highest first) plus their rendered cards."""

    criteria: str
    results: List[ScreenedStock]
    view: ScreeningView
