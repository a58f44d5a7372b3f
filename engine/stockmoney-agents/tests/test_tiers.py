"""
Purpose:
- Guardrail: score and risk-rating tier boundaries.
"""

import pytest

from stockmoney_agents.contracts.enums import RiskTier, ScoreTier
from stockmoney_agents.render.tiers import risk_tier, score_tier


@pytest.mark.parametrize(
    "score, tier",
    [
        (100, ScoreTier.HIGH),
        (85, ScoreTier.HIGH),
        (84.9, ScoreTier.MEDIUM),
        (60, ScoreTier.MEDIUM),
        (59, ScoreTier.LOW),
        (0, ScoreTier.LOW),
    ],
)
def test_score_tier_boundaries(score, tier):
    assert score_tier(score) is tier


@pytest.mark.parametrize(
    "rating, tier",
    [
        ("高风险", RiskTier.HIGH),
        ("中等风险", RiskTier.MEDIUM),
        ("低风险", RiskTier.LOW),
    ],
)
def test_risk_tier_exact_match(rating, tier):
    assert risk_tier(rating) is tier


@pytest.mark.parametrize("rating", ["", "高", "high", " 高风险"])
def test_unknown_rating_has_no_tier(rating):
    assert risk_tier(rating) is None
