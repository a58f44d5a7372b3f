"""
backend.api.schemas.analysis

Purpose:
    Request/response schemas for the /v1/analyze API endpoint.

Notes:
    - extra="forbid" prevents silent client typos (e.g., "tikcer").
    - A blank ticker passes validation; the engine guard rejects it
      with EMPTY_INPUT after the credential check, like the screening criteria.
    - `report` keeps the model's camelCase field names; `view` is the rendered report.

Created:
    2026-10-13
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from stockmoney_agents.contracts.reports import StockAnalysisReport
from stockmoney_agents.render.views import AnalysisView


class AnalyzeRequest(BaseModel):
    """
    Request payload for /v1/analyze.
    """

    model_config = ConfigDict(extra="forbid")

    ticker: str = Field(
        ...,
        description="Stock ticker, any market (e.g. AAPL, 600519.SH, 00700.HK).",
        examples=["AAPL", "600519.SH", "00700.HK"],
    )


class AnalyzeResponse(BaseModel):
    ticker: str
    report: StockAnalysisReport
    view: AnalysisView
