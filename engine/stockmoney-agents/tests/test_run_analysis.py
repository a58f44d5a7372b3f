"""
Tests single-stock analysis with fake model clients.

Purpose:
- Report parsing and risk tier mapping.
- Empty ticker and missing key never reach the model.
"""

import pytest

from stockmoney_agents.api.run_analysis import parse_analysis_payload, run_analysis
from stockmoney_agents.contracts.enums import RiskTier
from stockmoney_agents.contracts.errors import EmptyInput, GenerationFailure, MissingCredential
from stockmoney_agents.render.views import render_analysis
from stockmoney_agents.schema.response_schemas import ANALYSIS_SCHEMA


def test_high_risk_report_maps_to_risk_high(store, canned_client, analysis_payload):
    analysis_payload["riskAnalysis"]["rating"] = "高风险"
    client = canned_client(payload=analysis_payload)

    report = run_analysis(ticker="AAPL", credential_store=store, client=client)

    assert report.company_profile.ticker == "AAPL"
    view = render_analysis(report)
    assert view.risk.risk.tier is RiskTier.HIGH
    assert [s.title for s in view.sections()] == [
        "公司概况",
        "财务摘要",
        "SWOT 分析",
        "投资论点",
        "风险分析",
        "综合结论",
    ]
    assert client.calls[0]["schema"] is ANALYSIS_SCHEMA


def test_ticker_is_stripped_in_prompt(store, canned_client, analysis_payload):
    client = canned_client(payload=analysis_payload)
    run_analysis(ticker="  00700.HK \n", credential_store=store, client=client)
    assert '"00700.HK"' in client.calls[0]["prompt"]


def test_empty_ticker_no_call(store, canned_client):
    client = canned_client()
    with pytest.raises(EmptyInput) as exc:
        run_analysis(ticker=" ", credential_store=store, client=client)
    assert exc.value.user_message == "请输入股票代码。"
    assert client.calls == []


def test_missing_key_no_call(empty_store, canned_client):
    client = canned_client()
    with pytest.raises(MissingCredential):
        run_analysis(ticker="AAPL", credential_store=empty_store, client=client)
    assert client.calls == []


def test_unknown_rating_renders_without_tier(analysis_payload):
    analysis_payload["riskAnalysis"]["rating"] = "极高风险"
    view = render_analysis(parse_analysis_payload(analysis_payload))
    assert view.risk.risk.rating == "极高风险"
    assert view.risk.risk.tier is None


def test_metric_comment_fields_optional(analysis_payload):
    analysis_payload["financialSummary"][0]["revenue"] = {}
    report = parse_analysis_payload(analysis_payload)
    assert report.financial_summary[0].revenue.value == ""
    assert report.financial_summary[0].revenue.comment == ""


def test_missing_section_is_generation_failure(store, canned_client, analysis_payload):
    del analysis_payload["swotAnalysis"]
    with pytest.raises(GenerationFailure) as exc:
        run_analysis(ticker="AAPL", credential_store=store, client=canned_client(payload=analysis_payload))
    assert exc.value.user_message.startswith("分析失败")
