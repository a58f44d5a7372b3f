"""
backend.api.routes.v1.views

Purpose:
    Inspect and tear down the feature views, and switch the selected page.

Notes:
    - Only screener/analyzer carry request state; other pages return 404 here.
    - DELETE closes the view: state returns to idle and a pending call's outcome is discarded.
    - PUT /navigation closes the feature view being left.

Created:
    2026-10-13
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from backend.api.contracts.api_paths import ApiPaths
from backend.api.contracts.api_tags import ApiTags
from backend.api.contracts.error_contract import ApiErrorCode, ErrorResponse
from backend.api.dependencies import get_views
from backend.api.errors import ApiError
from backend.api.schemas.views import (
    NavigationRequest,
    NavigationResponse,
    ViewError,
    ViewStateResponse,
)
from stockmoney_agents.contracts.enums import Page
from stockmoney_agents.session.view_state import FeatureView, ViewRegistry

_paths = ApiPaths()

router = APIRouter(tags=[ApiTags().views])


def _feature_view(views: ViewRegistry, page: Page) -> FeatureView[Any]:
    try:
        return views.get(page)
    except KeyError:
        raise ApiError(
            status_code=404,
            error_code=ApiErrorCode.NOT_FOUND,
            message=f"View has no request state: {page.value}",
        ) from None


def _dump_result(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True)
    if isinstance(result, list):
        return [_dump_result(item) for item in result]
    return result


def _state_response(view: FeatureView[Any]) -> ViewStateResponse:
    state = view.state
    error = None
    if state.error is not None:
        error = ViewError(error=state.error.__class__.__name__, message=state.error.user_message)

    return ViewStateResponse(
        page=view.page,
        status=state.status,
        is_pending=view.is_pending,
        result=_dump_result(state.result),
        error=error,
    )


_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Page is not a feature view"}}


@router.get(_paths.view, response_model=ViewStateResponse, responses=_NOT_FOUND)
async def get_view(page: Page, views: ViewRegistry = Depends(get_views)) -> ViewStateResponse:
    return _state_response(_feature_view(views, page))


@router.delete(_paths.view, response_model=ViewStateResponse, responses=_NOT_FOUND)
async def close_view(page: Page, views: ViewRegistry = Depends(get_views)) -> ViewStateResponse:
    view = _feature_view(views, page)
    view.close()
    return _state_response(view)


@router.get(_paths.navigation, response_model=NavigationResponse)
async def get_navigation(views: ViewRegistry = Depends(get_views)) -> NavigationResponse:
    return NavigationResponse(current_page=views.current_page)


@router.put(_paths.navigation, response_model=NavigationResponse)
async def navigate(
    body: NavigationRequest, views: ViewRegistry = Depends(get_views)
) -> NavigationResponse:
    return NavigationResponse(current_page=views.navigate(body.page))
