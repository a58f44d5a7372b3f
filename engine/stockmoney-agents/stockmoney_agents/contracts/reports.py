"""
stockmoney_agents.contracts.reports

Purpose:
    Immutable value objects built from one parsed Gemini payload:
    ScreenedStock (screening) and StockAnalysisReport (single-stock analysis).

Notes:
    - Wire format is camelCase (matches the response schema); Python attributes are snake_case.
    - Models are frozen and hold tuples, so a result cannot be mutated after construction.
    - Soft expectations on the model (score in 1-100, >= 3 SWOT items, >= 3 key factors,
      chronological financial periods) are NOT enforced here.
    - rating stays a plain string: an unexpected value renders without a risk tier
      instead of failing the whole report.

Created:
    2026-10-12
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


# ---------------------------
# Screening
# ---------------------------
class KeyMetrics(_Payload):
    gross_margin: str
    pe_ratio: str


class ScreenedStock(_Payload):
    name: str
    ticker: str
    exchange: str
    score: Union[int, float]
    thesis: str
    key_metrics: KeyMetrics


# ---------------------------
# Single-stock analysis
# ---------------------------
class CompanyProfile(_Payload):
    name: str
    ticker: str
    exchange: str
    industry: str
    description: str


class MetricComment(_Payload):
    # Both keys are optional in the response schema.
    value: str = ""
    comment: str = ""


class FinancialPeriod(_Payload):
    period: str
    revenue: MetricComment
    net_profit: MetricComment
    gross_margin: MetricComment
    pe_ratio: MetricComment


class SwotAnalysis(_Payload):
    strengths: tuple[str, ...]
    weaknesses: tuple[str, ...]
    opportunities: tuple[str, ...]
    threats: tuple[str, ...]


class InvestmentThesis(_Payload):
    bull: str
    bear: str


class RiskAnalysis(_Payload):
    rating: str
    summary: str
    key_factors: tuple[str, ...]


class StockAnalysisReport(_Payload):
    company_profile: CompanyProfile
    financial_summary: tuple[FinancialPeriod, ...]
    swot_analysis: SwotAnalysis
    investment_thesis: InvestmentThesis
    risk_analysis: RiskAnalysis
    conclusion: str
