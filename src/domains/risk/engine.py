"""Risk assessment engine for account-opening applications.

Runs every category assessor over one application snapshot, then:
1. Aggregates factors into a weighted 0-100 score and a low/medium/high level
2. Generates baseline and factor-specific recommendations
3. Decides whether the application needs manual review

The engine is stateless. Time and identifiers come from injected callables,
so identical input with a fixed clock and id factory yields identical
results.
"""

import uuid
from collections.abc import Callable, Iterable
from datetime import UTC, datetime

import structlog

from .aggregation import calculate_overall_risk
from .assessors import ALL_ASSESSORS, RiskAssessor
from .config import RiskEngineConfig, default_config
from .models import RiskAssessmentInput, RiskAssessmentResult, RiskFactor
from .recommendations import generate_recommendations
from .review import requires_manual_review

logger = structlog.get_logger()

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return str(uuid.uuid4())


class RiskAssessmentEngine:
    """Deterministic, multi-category weighted rule evaluation."""

    def __init__(
        self,
        config: RiskEngineConfig | None = None,
        clock: Clock | None = None,
        id_factory: IdFactory | None = None,
        assessors: Iterable[RiskAssessor] | None = None,
    ) -> None:
        self._config = config or default_config
        self._clock = clock or _utcnow
        self._id_factory = id_factory or _new_id
        self._assessors = list(assessors) if assessors is not None else list(ALL_ASSESSORS)

    @property
    def config(self) -> RiskEngineConfig:
        return self._config

    @property
    def assessor_ids(self) -> list[str]:
        return [a.assessor_id for a in self._assessors]

    def evaluate_factors(self, data: RiskAssessmentInput, as_of: datetime) -> list[RiskFactor]:
        """Run all assessors in order and concatenate their factors."""
        factors: list[RiskFactor] = []
        for assessor in self._assessors:
            emitted = assessor.assess(data, self._config, as_of)
            if not emitted:
                logger.debug("assessor_no_factors", assessor=assessor.assessor_id)
            factors.extend(emitted)
        return factors

    def assess_risk(
        self,
        application_id: str,
        data: RiskAssessmentInput,
        assessed_by: str = "system",
    ) -> RiskAssessmentResult:
        """Assess one application snapshot and return a fresh result."""
        assessed_at = self._clock()
        factors = self.evaluate_factors(data, assessed_at)

        risk_score, overall_risk = calculate_overall_risk(factors, self._config)
        recommendations = generate_recommendations(factors, overall_risk, self._config)
        manual_review = requires_manual_review(factors, overall_risk, self._config)

        result = RiskAssessmentResult(
            id=self._id_factory(),
            application_id=application_id,
            overall_risk=overall_risk,
            risk_score=risk_score,
            factors=factors,
            recommendations=recommendations,
            requires_manual_review=manual_review,
            assessed_at=assessed_at,
            assessed_by=assessed_by,
        )

        logger.info(
            "risk_assessment_computed",
            application_id=application_id,
            account_type=data.account_type.value,
            risk_score=risk_score,
            overall_risk=overall_risk.value,
            requires_manual_review=manual_review,
            factor_count=len(factors),
        )

        return result


_default_engine = RiskAssessmentEngine()


def assess_risk(
    application_id: str,
    data: RiskAssessmentInput,
    assessed_by: str = "system",
) -> RiskAssessmentResult:
    """Assess with the module-level default engine."""
    return _default_engine.assess_risk(application_id, data, assessed_by)
