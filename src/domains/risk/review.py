"""Manual-review decision rules."""

from .config import RiskEngineConfig, default_config
from .models import RiskFactor, RiskImpact, RiskLevel


def _is_critical(factor: RiskFactor, config: RiskEngineConfig) -> bool:
    if factor.score >= config.review.critical_score:
        return True
    # Clean screening results mention the same keywords; only adverse findings count
    if factor.impact != RiskImpact.NEGATIVE:
        return False
    label = factor.factor.lower()
    return any(keyword.lower() in label for keyword in config.review.critical_keywords)


def requires_manual_review(
    factors: list[RiskFactor],
    overall_risk: RiskLevel,
    config: RiskEngineConfig = default_config,
) -> bool:
    """Decide whether the application must be routed to a human reviewer.

    Rules, in order: high classification; any critical factor (sanctions or
    high-risk-country finding, or a score at the critical level); enough
    factors above the elevated score floor. Keyword matches count only on
    negative-impact factors, so clean screening results are excluded.
    """
    if overall_risk == RiskLevel.HIGH:
        return True

    if any(_is_critical(f, config) for f in factors):
        return True

    r = config.review
    elevated = sum(1 for f in factors if f.score > r.elevated_score_floor)
    return elevated >= r.elevated_factor_count
