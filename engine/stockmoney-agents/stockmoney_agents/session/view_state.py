"""
stockmoney_agents.session.view_state

Purpose:
    Per-view request state machine for the two feature views (screener, analyzer)
    plus the in-memory page navigation that tears views down.

Role in system:
    The UI-side contract around one generation request per user action:

        idle -> pending -> success | failure

    - submit() while pending raises RequestInFlight (the trigger control is disabled).
    - Guard failures (MissingCredential / EmptyInput) set the view error and leave status
      and any previous result as they were; nothing is sent.
    - Starting a call clears the previous result and error before the call begins.
    - close() returns the view to idle. A call still in flight runs to completion, but its
      outcome is not applied and the awaiting caller gets RequestDiscarded.

Notes:
    All state transitions happen on the event loop thread; only the blocking client call runs
    in a worker thread (asyncio.to_thread). No locks, no cancellation.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from stockmoney_agents.api.requests import PreparedRequest
from stockmoney_agents.api.run_analysis import prepare_analysis
from stockmoney_agents.api.run_screening import prepare_screening
from stockmoney_agents.contracts.enums import Page
from stockmoney_agents.contracts.errors import (
    GenerationFailure,
    RequestDiscarded,
    RequestInFlight,
    StockMoneyError,
)
from stockmoney_agents.credentials.store import CredentialStore
from stockmoney_agents.llm.client import LLMClient
from stockmoney_agents.utils.logging import LogCtx, get_logger, with_ctx

T = TypeVar("T")

logger = get_logger(__name__)


class ViewStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class ViewState(Generic[T]):
    status: ViewStatus = ViewStatus.IDLE
    result: Optional[T] = None
    error: Optional[StockMoneyError] = None

    @property
    def error_message(self) -> str | None:
        return self.error.user_message if self.error is not None else None


class FeatureView(Generic[T]):
    def __init__(
        self,
        page: Page,
        prepare: Callable[[str | None], PreparedRequest[T]],
        client: LLMClient,
    ) -> None:
        self.page = page
        self._prepare = prepare
        self._client = client
        self._state: ViewState[T] = ViewState()
        # Bumped on close(); a pending call only applies its outcome if unchanged.
        self._epoch = 0
        self._log = with_ctx(logger, LogCtx(view=page.value))

    @property
    def state(self) -> ViewState[T]:
        return self._state

    @property
    def is_pending(self) -> bool:
        return self._state.status is ViewStatus.PENDING

    async def submit(self, user_input: str | None) -> T:
        if self.is_pending:
            raise RequestInFlight(self.page.value)

        try:
            prepared = self._prepare(user_input)
        except StockMoneyError as e:
            self._state = ViewState(status=self._state.status, result=self._state.result, error=e)
            self._log.info("request rejected before sending: %s", e.__class__.__name__)
            raise

        epoch = self._epoch
        self._state = ViewState(status=ViewStatus.PENDING)
        self._log.debug("request pending")

        try:
            result = await asyncio.to_thread(prepared.execute, self._client)
        except GenerationFailure as e:
            if epoch != self._epoch:
                self._log.info("failure discarded after view closed")
                raise RequestDiscarded(self.page.value) from e
            self._state = ViewState(status=ViewStatus.FAILURE, error=e)
            self._log.warning("generation failed: %s", e)
            raise
        except Exception as e:
            if epoch != self._epoch:
                self._log.info("failure discarded after view closed")
                raise RequestDiscarded(self.page.value) from e
            failure = GenerationFailure(f"{e.__class__.__name__}: {e}", feature=prepared.feature)
            self._state = ViewState(status=ViewStatus.FAILURE, error=failure)
            self._log.exception("request failed unexpectedly")
            raise failure from e

        if epoch != self._epoch:
            self._log.info("result discarded after view closed")
            raise RequestDiscarded(self.page.value)

        self._state = ViewState(status=ViewStatus.SUCCESS, result=result)
        self._log.debug("request succeeded")
        return result

    def close(self) -> None:
        self._epoch += 1
        self._state = ViewState()
        self._log.debug("view closed")


class ViewRegistry:
    """
    Process-wide holder of the feature views and the selected page.
    Leaving a feature page closes its view.
    """

    def __init__(self, *, credential_store: CredentialStore, client: LLMClient) -> None:
        self.credential_store = credential_store
        self.screener: FeatureView[Any] = FeatureView(
            Page.SCREENER, partial(prepare_screening, credential_store=credential_store), client
        )
        self.analyzer: FeatureView[Any] = FeatureView(
            Page.ANALYZER, partial(prepare_analysis, credential_store=credential_store), client
        )
        self._views: Dict[Page, FeatureView[Any]] = {
            Page.SCREENER: self.screener,
            Page.ANALYZER: self.analyzer,
        }
        self.current_page = Page.SCREENER

    def get(self, page: Page) -> FeatureView[Any]:
        try:
            return self._views[page]
        except KeyError:
            raise KeyError(f"{page.value} is not a feature view") from None

    def navigate(self, page: Page) -> Page:
        if page is not self.current_page and self.current_page in self._views:
            self._views[self.current_page].close()
        self.current_page = page
        return self.current_page
