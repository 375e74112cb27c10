"""Abstract base class for category risk assessors."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime

from ..config import RiskEngineConfig
from ..models import RiskAssessmentInput, RiskCategory, RiskFactor, RiskImpact


class RiskAssessor(ABC):
    """Base class for all category assessors.

    Assessors are pure: they read one slice of the application snapshot and
    return zero or more factors. ``as_of`` is the engine's clock reading and
    is the only notion of "now" an assessor may use.
    """

    assessor_id: str
    category: RiskCategory

    @abstractmethod
    def assess(
        self,
        data: RiskAssessmentInput,
        config: RiskEngineConfig,
        as_of: datetime,
    ) -> list[RiskFactor]:
        """Evaluate this assessor and return its factors in emission order."""
        ...

    def _factor(
        self,
        factor: str,
        weight: float,
        score: int,
        impact: RiskImpact,
        description: str,
    ) -> RiskFactor:
        """Convenience: build a factor in this assessor's category."""
        return RiskFactor(
            category=self.category,
            factor=factor,
            weight=weight,
            score=score,
            impact=impact,
            description=description,
        )

    @staticmethod
    def _first_match(tiers: Iterable[tuple[bool, RiskFactor]]) -> list[RiskFactor]:
        """Return the factor of the first tier whose predicate holds, if any.

        Tiers are evaluated top to bottom, so at most one factor is emitted
        per dimension.
        """
        for matched, factor in tiers:
            if matched:
                return [factor]
        return []
