"""
stockmoney_agents.schema.response_schemas

Purpose:
    The two fixed response schemas, one per feature. They mirror
    stockmoney_agents.contracts.reports field-for-field (camelCase wire names).

Notes:
    - Static configuration, never computed per request.
    - SWOT / keyFactors arrays are unbounded; the prompt asks for >= 3 items.
"""

from __future__ import annotations

from stockmoney_agents.contracts.enums import RiskRating
from stockmoney_agents.schema.nodes import (
    ArrayNode,
    EnumNode,
    NumberNode,
    ObjectNode,
    StringNode,
)

# ---------------------------
# Screening
# ---------------------------
SCREENED_STOCK_SCHEMA = ObjectNode(
    properties=(
        ("name", StringNode(description="公司全称")),
        ("ticker", StringNode(description="股票代码")),
        ("exchange", StringNode(description="交易所, 例如：深交所, NASDAQ")),
        (
            "score",
            NumberNode(description="综合评分 (1-100)，代表该股票与筛选标准的匹配程度"),
        ),
        (
            "thesis",
            StringNode(description="投资论点摘要，解释为何推荐该股票及其竞争优势"),
        ),
        (
            "keyMetrics",
            ObjectNode(
                properties=(
                    ("grossMargin", StringNode(description="最新财报毛利率 (例如 '55.2%')")),
                    ("peRatio", StringNode(description="市盈率 TTM (例如 '约32倍')")),
                ),
                required=("grossMargin", "peRatio"),
            ),
        ),
    ),
    required=("name", "ticker", "exchange", "score", "thesis", "keyMetrics"),
)

SCREENER_SCHEMA = ArrayNode(items=SCREENED_STOCK_SCHEMA)


# ---------------------------
# Single-stock analysis
# ---------------------------
def _metric_comment() -> ObjectNode:
    # value/comment are both optional.
    return ObjectNode(properties=(("value", StringNode()), ("comment", StringNode())))


_STRING_LIST = ArrayNode(items=StringNode())

FINANCIAL_PERIOD_SCHEMA = ObjectNode(
    properties=(
        (
            "period",
            StringNode(description="财报对应的周期, e.g., '2024年度', '2025年第一季度'"),
        ),
        ("revenue", _metric_comment()),
        ("netProfit", _metric_comment()),
        ("grossMargin", _metric_comment()),
        ("peRatio", _metric_comment()),
    ),
    required=("period", "revenue", "netProfit", "grossMargin", "peRatio"),
)

ANALYSIS_SCHEMA = ObjectNode(
    properties=(
        (
            "companyProfile",
            ObjectNode(
                properties=(
                    ("name", StringNode()),
                    ("ticker", StringNode()),
                    ("exchange", StringNode()),
                    ("industry", StringNode()),
                    ("description", StringNode()),
                ),
                required=("name", "ticker", "exchange", "industry", "description"),
            ),
        ),
        (
            "financialSummary",
            ArrayNode(
                items=FINANCIAL_PERIOD_SCHEMA,
                description="包含多个财报周期的数组，必须包含最近一个完整财年和当前年度已公布的所有季度。",
            ),
        ),
        (
            "swotAnalysis",
            ObjectNode(
                properties=(
                    ("strengths", _STRING_LIST),
                    ("weaknesses", _STRING_LIST),
                    ("opportunities", _STRING_LIST),
                    ("threats", _STRING_LIST),
                ),
                required=("strengths", "weaknesses", "opportunities", "threats"),
            ),
        ),
        (
            "investmentThesis",
            ObjectNode(
                properties=(("bull", StringNode()), ("bear", StringNode())),
                required=("bull", "bear"),
            ),
        ),
        (
            "riskAnalysis",
            ObjectNode(
                properties=(
                    ("rating", EnumNode(values=tuple(r.value for r in RiskRating))),
                    ("summary", StringNode()),
                    ("keyFactors", _STRING_LIST),
                ),
                required=("rating", "summary", "keyFactors"),
            ),
        ),
        ("conclusion", StringNode()),
    ),
    required=(
        "companyProfile",
        "financialSummary",
        "swotAnalysis",
        "investmentThesis",
        "riskAnalysis",
        "conclusion",
    ),
)
