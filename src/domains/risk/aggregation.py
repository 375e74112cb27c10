"""Weighted aggregation of risk factors into a score and classification.

Factor weights are local relevance indicators. They are not renormalized to
sum to 1, so the effective scale depends on which assessors produced
factors for a given application.
"""

import math

from .config import RiskEngineConfig, default_config
from .models import RiskFactor, RiskLevel


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def classify_risk(score: int, config: RiskEngineConfig = default_config) -> RiskLevel:
    """Bucket a 0-100 score; ties resolve to the lower-risk level."""
    c = config.classification
    if score <= c.low_max:
        return RiskLevel.LOW
    if score <= c.medium_max:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def calculate_overall_risk(
    factors: list[RiskFactor],
    config: RiskEngineConfig = default_config,
) -> tuple[int, RiskLevel]:
    """Return (risk_score, overall_risk) for a factor list.

    An empty list falls back to the configured neutral score.
    """
    if not factors:
        score = config.classification.empty_score
        return score, classify_risk(score, config)

    total_weight = sum(f.weight for f in factors)
    weighted = sum(f.score * f.weight for f in factors)
    score = _round_half_up(weighted / total_weight)
    score = min(100, max(0, score))
    return score, classify_risk(score, config)
