"""
backend.api.routes.v1.screening

Purpose:
    POST /v1/screen: run AI stock screening through the screener view.

Notes:
    - The route is async so the view state machine only changes on the event loop;
      the blocking model call runs in a worker thread inside FeatureView.submit().
    - Engine errors propagate to the global StockMoneyError handler.

Created:
    2026-10-13
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from backend.api.contracts.api_paths import ApiPaths
from backend.api.contracts.api_tags import ApiTags
from backend.api.contracts.error_contract import ErrorResponse
from backend.api.dependencies import get_views
from backend.api.schemas.screening import ScreenRequest, ScreenResponse
from stockmoney_agents.render.views import render_screening
from stockmoney_agents.session.view_state import ViewRegistry

_paths = ApiPaths()

router = APIRouter(tags=[ApiTags().screening])


@router.post(
    _paths.screen,
    response_model=ScreenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing API key or blank criteria"},
        409: {"model": ErrorResponse, "description": "Screening already pending, or view closed"},
        422: {"model": ErrorResponse, "description": "Request validation failed"},
        502: {"model": ErrorResponse, "description": "Model call or response parsing failed"},
    },
)
async def screen(body: ScreenRequest, views: ViewRegistry = Depends(get_views)) -> ScreenResponse:
    stocks = await views.screener.submit(body.criteria)
    return ScreenResponse(criteria=body.criteria, results=stocks, view=render_screening(stocks))
