"""
Purpose:
- Prompts embed user input verbatim in the fixed role text.
- Response schemas render the Gemini responseSchema dialect.
"""

import pytest

from stockmoney_agents.llm.analysis_prompt import build_analysis_prompt
from stockmoney_agents.llm.screening_prompt import build_screening_prompt
from stockmoney_agents.schema.nodes import ArrayNode, EnumNode, ObjectNode, StringNode
from stockmoney_agents.schema.response_schemas import ANALYSIS_SCHEMA, SCREENER_SCHEMA


def test_screening_prompt_embeds_criteria():
    prompt = build_screening_prompt("毛利率 > 50% {not a placeholder}")
    assert '**用户选股标准: "毛利率 > 50% {not a placeholder}"**' in prompt
    assert "量化投资分析师" in prompt


def test_analysis_prompt_embeds_ticker():
    prompt = build_analysis_prompt("600519.SH")
    assert '"600519.SH"' in prompt


def test_screener_schema_is_array_of_objects():
    rendered = SCREENER_SCHEMA.to_gemini()
    assert rendered["type"] == "ARRAY"
    item = rendered["items"]
    assert item["type"] == "OBJECT"
    assert list(item["properties"]) == ["name", "ticker", "exchange", "score", "thesis", "keyMetrics"]
    assert item["properties"]["score"]["type"] == "NUMBER"
    assert item["required"] == ["name", "ticker", "exchange", "score", "thesis", "keyMetrics"]


def test_analysis_schema_rating_enum():
    rendered = ANALYSIS_SCHEMA.to_gemini()
    rating = rendered["properties"]["riskAnalysis"]["properties"]["rating"]
    assert rating["type"] == "STRING"
    assert rating["enum"] == ["高风险", "中等风险", "低风险"]
    assert set(rendered["required"]) == {
        "companyProfile",
        "financialSummary",
        "swotAnalysis",
        "investmentThesis",
        "riskAnalysis",
        "conclusion",
    }


def test_metric_comment_has_no_required():
    period = ANALYSIS_SCHEMA.get_property("financialSummary")
    assert isinstance(period, ArrayNode)
    revenue = period.items.get_property("revenue").to_gemini()
    assert "required" not in revenue


def test_object_node_rejects_unknown_required():
    with pytest.raises(ValueError):
        ObjectNode(properties=(("a", StringNode()),), required=("b",))


def test_object_node_rejects_duplicate_names():
    with pytest.raises(ValueError):
        ObjectNode(properties=(("a", StringNode()), ("a", StringNode())))


def test_enum_node_requires_values():
    with pytest.raises(ValueError):
        EnumNode(values=())
