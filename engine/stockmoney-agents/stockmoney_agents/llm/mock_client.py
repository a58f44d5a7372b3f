from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, List

from stockmoney_agents.llm.client import (
    LLMProvider,
    parse_json_text,
    register_llm_provider,
)
from stockmoney_agents.schema.nodes import ArrayNode, SchemaNode

MOCK_SCREENING_PAYLOAD = [
    {
        "name": "贵州茅台酒股份有限公司",
        "ticker": "600519.SH",
        "exchange": "上交所",
        "score": 58,
        "thesis": "Mock 论点：品牌护城河深厚，但估值高于筛选标准。",
        "keyMetrics": {"grossMargin": "91.5%", "peRatio": "约28倍"},
    },
    {
        "name": "Apple Inc.",
        "ticker": "AAPL",
        "exchange": "NASDAQ",
        "score": 92,
        "thesis": "Mock 论点：生态系统带来高用户粘性与稳定现金流。",
        "keyMetrics": {"grossMargin": "46.2%", "peRatio": "约31倍"},
    },
    {
        "name": "腾讯控股有限公司",
        "ticker": "00700.HK",
        "exchange": "港交所",
        "score": 74,
        "thesis": "Mock 论点：社交与游戏双轮驱动。",
        "keyMetrics": {"grossMargin": "53.0%", "peRatio": "约18倍"},
    },
]

_MOCK_METRIC = {"value": "Mock", "comment": "Mock 点评"}

MOCK_ANALYSIS_PAYLOAD = {
    "companyProfile": {
        "name": "Apple Inc.",
        "ticker": "AAPL",
        "exchange": "NASDAQ",
        "industry": "消费电子",
        "description": "Mock 公司描述。",
    },
    "financialSummary": [
        {
            "period": "2024年度",
            "revenue": _MOCK_METRIC,
            "netProfit": _MOCK_METRIC,
            "grossMargin": _MOCK_METRIC,
            "peRatio": _MOCK_METRIC,
        },
        {
            "period": "2025年第一季度",
            "revenue": _MOCK_METRIC,
            "netProfit": _MOCK_METRIC,
            "grossMargin": _MOCK_METRIC,
            "peRatio": _MOCK_METRIC,
        },
    ],
    "swotAnalysis": {
        "strengths": ["Mock 优势 1", "Mock 优势 2", "Mock 优势 3"],
        "weaknesses": ["Mock 劣势 1", "Mock 劣势 2", "Mock 劣势 3"],
        "opportunities": ["Mock 机会 1", "Mock 机会 2", "Mock 机会 3"],
        "threats": ["Mock 威胁 1", "Mock 威胁 2", "Mock 威胁 3"],
    },
    "investmentThesis": {"bull": "Mock 看涨理由", "bear": "Mock 看跌理由"},
    "riskAnalysis": {
        "rating": "中等风险",
        "summary": "Mock 风险摘要",
        "keyFactors": ["Mock 风险 1", "Mock 风险 2", "Mock 风险 3"],
    },
    "conclusion": "Mock 结论",
}


@dataclass
class MockLLMClient:
    """
    Never touches the network. Array schemas get the screening payload, object schemas the
    analysis payload. Payloads round-trip through JSON text like a real response.
    """

    calls: List[dict] = field(default_factory=list)

    def generate(self, *, prompt: str, schema: SchemaNode, credential: str) -> Any:
        self.calls.append({"prompt": prompt, "schema": schema})
        payload = MOCK_SCREENING_PAYLOAD if isinstance(schema, ArrayNode) else MOCK_ANALYSIS_PAYLOAD
        return parse_json_text(json.dumps(payload, ensure_ascii=False), source="mock")


register_llm_provider(LLMProvider.MOCK, lambda cfg: MockLLMClient())
