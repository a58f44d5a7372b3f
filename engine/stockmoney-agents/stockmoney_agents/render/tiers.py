# stockmoney_agents/render/tiers.py
# Purpose: Score / risk-rating -> visual tier mapping (single source of truth for display classes).

from __future__ import annotations

from typing import Union

from stockmoney_agents.contracts.enums import RiskRating, RiskTier, ScoreTier

HIGH_SCORE_MIN = 85
MEDIUM_SCORE_MIN = 60

_RISK_TIERS = {
    RiskRating.HIGH.value: RiskTier.HIGH,
    RiskRating.MEDIUM.value: RiskTier.MEDIUM,
    RiskRating.LOW.value: RiskTier.LOW,
}


def score_tier(score: Union[int, float]) -> ScoreTier:
    if score >= HIGH_SCORE_MIN:
        return ScoreTier.HIGH
    if score >= MEDIUM_SCORE_MIN:
        return ScoreTier.MEDIUM
    return ScoreTier.LOW


def risk_tier(rating: str) -> RiskTier | None:
    """Exact string match only; unknown ratings get no tier."""
    return _RISK_TIERS.get(rating)
