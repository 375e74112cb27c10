"""Risk assessment service: readiness checks, result store, and audit trail."""

import structlog

from .engine import RiskAssessmentEngine
from .exceptions import (
    ApplicationNotReadyError,
    AssessmentAlreadyExistsError,
    AssessmentNotFoundError,
    RiskAssessmentFailedError,
)
from .models import AccountType, AuditTrailEntry, RiskAssessmentInput, RiskAssessmentResult

logger = structlog.get_logger()

NOT_READY_MESSAGE = "Risk assessment already performed or application not ready"


class RiskAssessmentService:
    """Runs the engine once per application and keeps the outcome on record."""

    def __init__(self, engine: RiskAssessmentEngine | None = None) -> None:
        self._engine = engine or RiskAssessmentEngine()
        # In-memory stores
        self._assessments: dict[str, RiskAssessmentResult] = {}
        self._audit: dict[str, list[AuditTrailEntry]] = {}

    def _check_ready(self, application_id: str, data: RiskAssessmentInput) -> None:
        if application_id in self._assessments:
            raise AssessmentAlreadyExistsError(NOT_READY_MESSAGE)
        if data.personal_info is None:
            raise ApplicationNotReadyError(NOT_READY_MESSAGE)
        if data.account_type != AccountType.CONSUMER and data.business_profile is None:
            raise ApplicationNotReadyError(NOT_READY_MESSAGE)

    def perform_assessment(
        self,
        application_id: str,
        data: RiskAssessmentInput,
        assessed_by: str = "system",
    ) -> RiskAssessmentResult:
        """Assess an application and record the result and an audit entry.

        Raises ApplicationNotReadyError or AssessmentAlreadyExistsError before
        the engine runs; engine failures surface as RiskAssessmentFailedError.
        """
        try:
            self._check_ready(application_id, data)
        except (ApplicationNotReadyError, AssessmentAlreadyExistsError) as exc:
            logger.warning(
                "risk_assessment_rejected",
                application_id=application_id,
                reason=type(exc).__name__,
            )
            raise

        try:
            result = self._engine.assess_risk(application_id, data, assessed_by)
        except Exception as exc:
            logger.exception("risk_assessment_failed", application_id=application_id)
            raise RiskAssessmentFailedError("Risk assessment failed") from exc

        self._assessments[application_id] = result
        self._audit.setdefault(application_id, []).append(
            AuditTrailEntry(
                application_id=application_id,
                action="risk_assessment_performed",
                description=(
                    f"Risk assessment completed with {result.overall_risk.value} risk level "
                    f"and score of {result.risk_score}"
                ),
                performed_by=assessed_by,
                changes={
                    "risk_level": {"from": None, "to": result.overall_risk.value},
                    "risk_score": {"from": None, "to": result.risk_score},
                    "requires_manual_review": result.requires_manual_review,
                    "factor_count": len(result.factors),
                },
                created_at=result.assessed_at,
            )
        )

        if result.requires_manual_review:
            logger.warning(
                "manual_review_required",
                application_id=application_id,
                overall_risk=result.overall_risk.value,
                risk_score=result.risk_score,
            )

        return result

    @property
    def engine(self) -> RiskAssessmentEngine:
        return self._engine

    def get_assessment(self, application_id: str) -> RiskAssessmentResult:
        result = self._assessments.get(application_id)
        if result is None:
            raise AssessmentNotFoundError(f"No risk assessment for application {application_id}")
        return result

    def get_audit_trail(self, application_id: str) -> list[AuditTrailEntry]:
        """Audit entries for an application, oldest first."""
        return list(self._audit.get(application_id, []))
