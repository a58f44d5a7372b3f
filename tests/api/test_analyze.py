"""
tests.api.test_analyze

Purpose:
    API regression tests for /v1/analyze contract and validation envelope.
"""

from __future__ import annotations

from stockmoney_agents.credentials.store import InMemoryCredentialStore


def test_analyze_success(client, llm_client) -> None:
    r = client.post("/v1/analyze", json={"ticker": " AAPL "})
    assert r.status_code == 200, r.text

    data = r.json()
    assert data["ticker"] == "AAPL"
    assert data["report"]["companyProfile"]["ticker"] == "AAPL"
    assert len(data["report"]["financialSummary"]) == 2

    view = data["view"]
    assert view["title"] == "个股综合分析报告"
    assert view["risk"]["risk"]["tier"] == "risk-medium"
    assert [q["key"] for q in view["swot"]["quadrants"]] == ["s", "w", "o", "t"]

    assert len(llm_client.calls) == 1
    assert "AAPL" in llm_client.calls[0]["prompt"]


def test_analyze_empty_ticker_no_call(client, llm_client) -> None:
    r = client.post("/v1/analyze", json={"ticker": ""})
    assert r.status_code == 400, r.text

    data = r.json()
    assert data["error_code"] == "EMPTY_INPUT"
    assert data["message"] == "请输入股票代码。"
    assert llm_client.calls == []


def test_analyze_without_key(client_factory) -> None:
    client = client_factory(store=InMemoryCredentialStore("   "))
    r = client.post("/v1/analyze", json={"ticker": "AAPL"})
    assert r.status_code == 400, r.text
    assert r.json()["message"] == "请先在“设置”页面中配置您的 Gemini API Key。"


def test_analyze_generation_failure_message(client_factory, failing_llm_client) -> None:
    client = client_factory(client=failing_llm_client)
    r = client.post("/v1/analyze", json={"ticker": "AAPL"})
    assert r.status_code == 502, r.text
    assert r.json()["message"].startswith("分析失败")
    assert r.json()["details"] == {"error": "GenerationFailure"}


def test_analyze_missing_ticker_422_has_error_envelope(client) -> None:
    r = client.post("/v1/analyze", json={})
    assert r.status_code == 422, r.text

    data = r.json()
    assert "request_id" in data
    assert data["error_code"] == "BAD_REQUEST"
    assert data["message"] == "Request validation failed"
    assert "errors" in data["details"]
    assert r.headers.get("x-request-id")


def test_analyze_unknown_field_forbidden(client) -> None:
    r = client.post("/v1/analyze", json={"ticker": "AAPL", "tikcer": "MSFT"})
    assert r.status_code == 422, r.text

    errors = r.json()["details"]["errors"]
    assert any(e.get("type") == "extra_forbidden" for e in errors)
