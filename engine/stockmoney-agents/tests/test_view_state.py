"""
Tests the per-view request state machine.

Purpose:
- One request in flight per view; starting a call clears the prior outcome.
- Guard failures keep the prior status/result and never call the model.
- Closing a view discards the outcome of a call still in flight.

Notes:
- Driven with asyncio.run inside plain tests; the model call blocks on a threading.Event
  so the test decides when it finishes.
"""

import asyncio
import threading
from functools import partial

import httpx
import pytest

from stockmoney_agents.api.run_screening import prepare_screening
from stockmoney_agents.contracts.enums import Page
from stockmoney_agents.contracts.errors import (
    EmptyInput,
    GenerationFailure,
    MissingCredential,
    RequestDiscarded,
    RequestInFlight,
)
from stockmoney_agents.credentials.store import InMemoryCredentialStore
from stockmoney_agents.llm.client import GeminiClient
from stockmoney_agents.llm.mock_client import MOCK_SCREENING_PAYLOAD
from stockmoney_agents.session.view_state import FeatureView, ViewRegistry, ViewStatus


class GatedClient:
    def __init__(self, payload=None, error=None):
        self.payload = payload if payload is not None else MOCK_SCREENING_PAYLOAD
        self.error = error
        self.gate = threading.Event()
        self.calls = 0

    def generate(self, *, prompt, schema, credential):
        self.calls += 1
        assert self.gate.wait(timeout=5), "test never released the gate"
        if self.error is not None:
            raise self.error
        return self.payload


def _screener(store, client):
    return FeatureView(Page.SCREENER, partial(prepare_screening, credential_store=store), client)


async def _until_pending(view):
    for _ in range(100):
        if view.is_pending:
            return
        await asyncio.sleep(0)
    raise AssertionError("view never became pending")


def test_success_transitions(store):
    client = GatedClient()
    client.gate.set()
    view = _screener(store, client)
    assert view.state.status is ViewStatus.IDLE

    result = asyncio.run(view.submit("高股息"))

    assert view.state.status is ViewStatus.SUCCESS
    assert view.state.result == result
    assert [s.score for s in result] == [92, 74, 58]
    assert view.state.error is None


def test_second_submit_while_pending_is_rejected(store):
    client = GatedClient()
    view = _screener(store, client)

    async def scenario():
        task = asyncio.create_task(view.submit("first"))
        await _until_pending(view)
        with pytest.raises(RequestInFlight):
            await view.submit("second")
        client.gate.set()
        return await task

    result = asyncio.run(scenario())
    assert len(result) == 3
    assert client.calls == 1


def test_starting_a_call_clears_previous_outcome(store):
    client = GatedClient()
    client.gate.set()
    view = _screener(store, client)
    asyncio.run(view.submit("first"))
    assert view.state.result is not None

    client.gate.clear()

    async def scenario():
        task = asyncio.create_task(view.submit("second"))
        await _until_pending(view)
        snapshot = view.state
        client.gate.set()
        await task
        return snapshot

    pending = asyncio.run(scenario())
    assert pending.status is ViewStatus.PENDING
    assert pending.result is None
    assert pending.error is None


def test_guard_failure_keeps_prior_result(store):
    client = GatedClient()
    client.gate.set()
    view = _screener(store, client)
    first = asyncio.run(view.submit("first"))

    with pytest.raises(EmptyInput):
        asyncio.run(view.submit("   "))

    assert view.state.status is ViewStatus.SUCCESS
    assert view.state.result == first
    assert view.state.error_message == "请输入您的选股标准。"
    assert client.calls == 1


def test_missing_key_sets_error_without_call():
    client = GatedClient()
    view = _screener(InMemoryCredentialStore(), client)

    with pytest.raises(MissingCredential):
        asyncio.run(view.submit("高股息"))

    assert view.state.status is ViewStatus.IDLE
    assert isinstance(view.state.error, MissingCredential)
    assert client.calls == 0


def test_failure_sets_failure_state(store):
    client = GatedClient(error=GenerationFailure("HTTP 500"))
    client.gate.set()
    view = _screener(store, client)

    with pytest.raises(GenerationFailure):
        asyncio.run(view.submit("高股息"))

    assert view.state.status is ViewStatus.FAILURE
    assert view.state.result is None
    assert view.state.error_message.startswith("筛选失败")


def test_close_discards_pending_outcome(store):
    client = GatedClient()
    view = _screener(store, client)

    async def scenario():
        task = asyncio.create_task(view.submit("高股息"))
        await _until_pending(view)
        view.close()
        client.gate.set()
        with pytest.raises(RequestDiscarded):
            await task

    asyncio.run(scenario())
    assert view.state.status is ViewStatus.IDLE
    assert view.state.result is None


def test_close_discards_pending_failure(store):
    client = GatedClient(error=GenerationFailure("HTTP 500"))
    view = _screener(store, client)

    async def scenario():
        task = asyncio.create_task(view.submit("高股息"))
        await _until_pending(view)
        view.close()
        client.gate.set()
        with pytest.raises(RequestDiscarded):
            await task

    asyncio.run(scenario())
    assert view.state.status is ViewStatus.IDLE
    assert view.state.error is None


def test_registry_navigation_closes_left_view(store, mock_client):
    views = ViewRegistry(credential_store=store, client=mock_client)
    asyncio.run(views.screener.submit("高股息"))
    assert views.screener.state.status is ViewStatus.SUCCESS

    assert views.navigate(Page.SCREENER) is Page.SCREENER
    assert views.screener.state.status is ViewStatus.SUCCESS

    views.navigate(Page.TRAINING)
    assert views.screener.state.status is ViewStatus.IDLE
    assert views.current_page is Page.TRAINING


def test_registry_rejects_static_pages(store, mock_client):
    views = ViewRegistry(credential_store=store, client=mock_client)
    assert views.get(Page.ANALYZER) is views.analyzer
    with pytest.raises(KeyError):
        views.get(Page.SETTINGS)


class ExplodingClient:
    def __init__(self):
        self.calls = 0

    def generate(self, *, prompt, schema, credential):
        self.calls += 1
        if self.calls == 1:
            raise RuntimeError("provider bug")
        return MOCK_SCREENING_PAYLOAD


def test_unexpected_client_error_fails_view_and_allows_retry(store):
    client = ExplodingClient()
    view = _screener(store, client)

    with pytest.raises(GenerationFailure) as exc:
        asyncio.run(view.submit("高股息"))
    assert "RuntimeError" in str(exc.value)
    assert view.state.status is ViewStatus.FAILURE
    assert view.state.error_message.startswith("筛选失败")

    result = asyncio.run(view.submit("高股息"))
    assert len(result) == 3
    assert view.state.status is ViewStatus.SUCCESS


def test_malformed_gemini_body_does_not_leave_view_pending(store):
    client = GeminiClient(
        model_name="gemini-2.5-flash",
        base_url="https://gemini.test",
        timeout_s=None,
        transport=httpx.MockTransport(lambda r: httpx.Response(200, json={"candidates": ["oops"]})),
    )
    view = _screener(store, client)

    with pytest.raises(GenerationFailure):
        asyncio.run(view.submit("高股息"))
    assert view.state.status is ViewStatus.FAILURE
    assert not view.is_pending
