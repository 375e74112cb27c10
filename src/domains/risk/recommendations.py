"""Recommendation generation from classification and high-severity factors."""

from .config import RiskEngineConfig, default_config
from .models import RiskFactor, RiskLevel


def _factor_recommendation(factor: RiskFactor, config: RiskEngineConfig) -> str | None:
    label = factor.factor.lower()
    triggers = config.recommendations.factor_triggers.get(factor.category, ())
    for keyword, recommendation in triggers:
        if keyword.lower() in label:
            return recommendation
    return None


def generate_recommendations(
    factors: list[RiskFactor],
    overall_risk: RiskLevel,
    config: RiskEngineConfig = default_config,
) -> list[str]:
    """Baseline actions for the classification, then factor-specific ones.

    Only factors scoring above the configured floor contribute. Duplicates
    are dropped, keeping first-seen order.
    """
    recommendations = list(config.recommendations.baseline[overall_risk.value])

    floor = config.review.recommendation_score_floor
    for factor in factors:
        if factor.score <= floor:
            continue
        recommendation = _factor_recommendation(factor, config)
        if recommendation is not None:
            recommendations.append(recommendation)

    return list(dict.fromkeys(recommendations))
