"""
backend.api.routes.v1.analysis

Purpose:
    POST /v1/analyze: generate a single-stock analysis report through the analyzer view.

Notes:
    - Same execution model as /v1/screen (async route, blocking call off the loop).
    - The response echoes the ticker as sent to the model (whitespace stripped).

Created:
    2026-10-13
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from backend.api.contracts.api_paths import ApiPaths
from backend.api.contracts.api_tags import ApiTags
from backend.api.contracts.error_contract import ErrorResponse
from backend.api.dependencies import get_views
from backend.api.schemas.analysis import AnalyzeRequest, AnalyzeResponse
from stockmoney_agents.render.views import render_analysis
from stockmoney_agents.session.view_state import ViewRegistry

_paths = ApiPaths()

router = APIRouter(tags=[ApiTags().analysis])


@router.post(
    _paths.analyze,
    response_model=AnalyzeResponse,
    responses={
        400: {
            "model": ErrorResponse,
            "description": "Missing API key or blank ticker",
            "content": {
                "application/json": {
                    "examples": {
                        "missing_credential": {
                            "summary": "No API key stored",
                            "value": {
                                "request_id": "REQ_ID",
                                "error_code": "MISSING_CREDENTIAL",
                                "message": "请先在“设置”页面中配置您的 Gemini API Key。",
                                "details": {"error": "MissingCredential"},
                            },
                        },
                        "empty_input": {
                            "summary": "Blank ticker",
                            "value": {
                                "request_id": "REQ_ID",
                                "error_code": "EMPTY_INPUT",
                                "message": "请输入股票代码。",
                                "details": {"error": "EmptyInput"},
                            },
                        },
                    }
                }
            },
        },
        409: {"model": ErrorResponse, "description": "Analysis already pending, or view closed"},
        422: {"model": ErrorResponse, "description": "Request validation failed"},
        502: {"model": ErrorResponse, "description": "Model call or response parsing failed"},
    },
)
async def analyze(body: AnalyzeRequest, views: ViewRegistry = Depends(get_views)) -> AnalyzeResponse:
    report = await views.analyzer.submit(body.ticker)
    return AnalyzeResponse(
        ticker=body.ticker.strip(),
        report=report,
        view=render_analysis(report),
    )
