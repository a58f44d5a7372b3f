# stockmoney_agents/render/text.py
# Purpose: Plain-text layout of rendered views for the CLI `--output pretty` mode.
# Returns lines; callers decide where they go (stdout via oprint).

from __future__ import annotations

from typing import List

from stockmoney_agents.render.views import AnalysisView, ScreeningView


def _section(title: str) -> List[str]:
    return ["", title, "=" * len(title)]


def _bullets(items) -> List[str]:
    return [f"{i}. {item}" for i, item in enumerate(items, 1)]


def format_screening_text(view: ScreeningView) -> List[str]:
    lines = [view.title, "-" * len(view.title)]
    if not view.cards:
        lines.append("—")
        return lines

    for card in view.cards:
        lines.append("")
        lines.append(f"{card.name} ({card.subtitle})")
        lines.append(f"{card.score_label}: {card.score} [{card.tier.value}]")
        lines.append(f"{card.thesis_label}: {card.thesis}")
        metrics = " | ".join(f"{m.label}: {m.value}" for m in card.metrics)
        lines.append(f"{card.metrics_label}: {metrics}")
    return lines


def format_analysis_text(view: AnalysisView) -> List[str]:
    lines = [view.title, view.subtitle]

    profile = view.profile
    lines += _section(f"{profile.icon} {profile.title}")
    lines.append(f"{profile.name} ({profile.ticker})")
    lines += [f"{fact.label}: {fact.value}" for fact in profile.facts]
    lines.append(profile.description)

    financials = view.financials
    lines += _section(f"{financials.icon} {financials.title}")
    for period in financials.periods:
        lines.append(f"[{period.period}]")
        for m in period.metrics:
            lines.append(f"  {m.label}: {m.value} — {m.comment}")

    swot = view.swot
    lines += _section(f"{swot.icon} {swot.title}")
    for quadrant in swot.quadrants:
        lines.append(quadrant.title)
        lines += [f"  {line}" for line in _bullets(quadrant.items)]

    thesis = view.thesis
    lines += _section(f"{thesis.icon} {thesis.title}")
    for argument in thesis.arguments:
        lines.append(argument.label)
        lines.append(f"  {argument.value}")

    risk = view.risk
    lines += _section(f"{risk.icon} {risk.title}")
    tier = f" [{risk.risk.tier.value}]" if risk.risk.tier else ""
    lines.append(f"{risk.rating_label}{risk.risk.rating}{tier}")
    lines.append(risk.risk.summary)
    lines.append(risk.factors_label)
    lines += _bullets(risk.risk.key_factors)

    conclusion = view.conclusion
    lines += _section(f"{conclusion.icon} {conclusion.title}")
    lines.append(conclusion.text)
    return lines
