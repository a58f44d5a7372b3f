"""
stockmoney_agents.render.views

Purpose:
    Deterministic, side-effect-free mapping from results to display structures
    (what the browser front end and the CLI pretty printer render).

Notes:
    - Purely presentational: input order is preserved (ranking happens in run_screening).
    - Labels / titles / icons are the product's simplified-Chinese copy.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict

from stockmoney_agents.contracts.enums import RiskTier, ScoreTier
from stockmoney_agents.contracts.reports import (
    CompanyProfile,
    FinancialPeriod,
    InvestmentThesis,
    ScreenedStock,
    StockAnalysisReport,
)
from stockmoney_agents.render.tiers import risk_tier, score_tier

SCREENING_TITLE = "筛选结果"
SCORE_LABEL = "匹配分"
THESIS_LABEL = "投资论点"
KEY_METRICS_LABEL = "关键指标"
GROSS_MARGIN_LABEL = "毛利率"
PE_RATIO_LABEL = "市盈率 (TTM)"

REPORT_TITLE = "个股综合分析报告"
REPORT_SUBTITLE = "由 Gemini AI 生成"


class _View(BaseModel):
    model_config = ConfigDict(frozen=True)


class LabeledValue(_View):
    label: str
    value: str


# ---------------------------
# Screening
# ---------------------------
class StockCardView(_View):
    name: str
    subtitle: str
    score: Union[int, float]
    score_label: str = SCORE_LABEL
    tier: ScoreTier
    thesis_label: str = THESIS_LABEL
    thesis: str
    metrics_label: str = KEY_METRICS_LABEL
    metrics: Tuple[LabeledValue, ...]


class ScreeningView(_View):
    title: str = SCREENING_TITLE
    cards: Tuple[StockCardView, ...]


def render_stock_card(stock: ScreenedStock) -> StockCardView:
    return StockCardView(
        name=stock.name,
        subtitle=f"{stock.ticker} · {stock.exchange}",
        score=stock.score,
        tier=score_tier(stock.score),
        thesis=stock.thesis,
        metrics=(
            LabeledValue(label=GROSS_MARGIN_LABEL, value=stock.key_metrics.gross_margin),
            LabeledValue(label=PE_RATIO_LABEL, value=stock.key_metrics.pe_ratio),
        ),
    )


def render_screening(stocks: Sequence[ScreenedStock]) -> ScreeningView:
    return ScreeningView(cards=tuple(render_stock_card(s) for s in stocks))


# ---------------------------
# Single-stock analysis
# ---------------------------
class MetricView(_View):
    label: str
    value: str
    comment: str


class PeriodView(_View):
    period: str
    metrics: Tuple[MetricView, ...]


class SwotQuadrantView(_View):
    key: str
    title: str
    items: Tuple[str, ...]


class RiskView(_View):
    rating: str
    tier: RiskTier | None
    summary: str
    key_factors: Tuple[str, ...]


class ReportSectionView(_View):
    icon: str
    title: str


class ProfileSection(ReportSectionView):
    icon: str = "🏢"
    title: str = "公司概况"
    name: str
    ticker: str
    facts: Tuple[LabeledValue, ...]
    description: str


class FinancialsSection(ReportSectionView):
    icon: str = "💹"
    title: str = "财务摘要"
    periods: Tuple[PeriodView, ...]


class SwotSection(ReportSectionView):
    icon: str = "🧭"
    title: str = "SWOT 分析"
    quadrants: Tuple[SwotQuadrantView, ...]


class ThesisSection(ReportSectionView):
    icon: str = "💡"
    title: str = "投资论点"
    arguments: Tuple[LabeledValue, ...]


class RiskSection(ReportSectionView):
    icon: str = "⚠️"
    title: str = "风险分析"
    rating_label: str = "综合风险评级："
    factors_label: str = "主要风险因素："
    risk: RiskView


class ConclusionSection(ReportSectionView):
    icon: str = "🎯"
    title: str = "综合结论"
    text: str


class AnalysisView(_View):
    title: str = REPORT_TITLE
    subtitle: str = REPORT_SUBTITLE
    profile: ProfileSection
    financials: FinancialsSection
    swot: SwotSection
    thesis: ThesisSection
    risk: RiskSection
    conclusion: ConclusionSection

    def sections(self) -> List[ReportSectionView]:
        return [self.profile, self.financials, self.swot, self.thesis, self.risk, self.conclusion]


def _render_profile(profile: CompanyProfile) -> ProfileSection:
    return ProfileSection(
        name=profile.name,
        ticker=profile.ticker,
        facts=(
            LabeledValue(label="交易所", value=profile.exchange),
            LabeledValue(label="行业板块", value=profile.industry),
        ),
        description=profile.description,
    )


def _render_period(period: FinancialPeriod) -> PeriodView:
    rows = (
        ("营收", period.revenue),
        ("净利润", period.net_profit),
        (GROSS_MARGIN_LABEL, period.gross_margin),
        (PE_RATIO_LABEL, period.pe_ratio),
    )
    return PeriodView(
        period=period.period,
        metrics=tuple(MetricView(label=label, value=m.value, comment=m.comment) for label, m in rows),
    )


def _render_thesis(thesis: InvestmentThesis) -> ThesisSection:
    return ThesisSection(
        arguments=(
            LabeledValue(label="看涨理由 (Bull) 👍", value=thesis.bull),
            LabeledValue(label="看跌理由 (Bear) 👎", value=thesis.bear),
        )
    )


def render_analysis(report: StockAnalysisReport) -> AnalysisView:
    swot = report.swot_analysis
    risk = report.risk_analysis

    return AnalysisView(
        profile=_render_profile(report.company_profile),
        financials=FinancialsSection(
            periods=tuple(_render_period(p) for p in report.financial_summary)
        ),
        swot=SwotSection(
            quadrants=(
                SwotQuadrantView(key="s", title="优势 (S)", items=swot.strengths),
                SwotQuadrantView(key="w", title="劣势 (W)", items=swot.weaknesses),
                SwotQuadrantView(key="o", title="机会 (O)", items=swot.opportunities),
                SwotQuadrantView(key="t", title="威胁 (T)", items=swot.threats),
            )
        ),
        thesis=_render_thesis(report.investment_thesis),
        risk=RiskSection(
            risk=RiskView(
                rating=risk.rating,
                tier=risk_tier(risk.rating),
                summary=risk.summary,
                key_factors=risk.key_factors,
            )
        ),
        conclusion=ConclusionSection(text=report.conclusion),
    )
