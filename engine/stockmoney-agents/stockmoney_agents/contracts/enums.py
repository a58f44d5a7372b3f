"""
stockmoney_agents/contracts/enums.py

Purpose:
    Shared enums used across prompts, renderer, view state and the HTTP layer
    to avoid circular imports and scattered string literals.
"""

from __future__ import annotations

from enum import Enum


class Feature(str, Enum):
    SCREENING = "screening"
    ANALYSIS = "analysis"


class Page(str, Enum):
    """Navigable views. Selection is in-memory only."""

    SCREENER = "screener"
    ANALYZER = "analyzer"
    TRAINING = "training"
    SETTINGS = "settings"


class RiskRating(str, Enum):
    HIGH = "高风险"
    MEDIUM = "中等风险"
    LOW = "低风险"


class ScoreTier(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RiskTier(str, Enum):
    HIGH = "risk-high"
    MEDIUM = "risk-medium"
    LOW = "risk-low"
