"""Account-opening risk assessment API endpoints.

Provides endpoints to run the risk engine for an application, read back the
stored assessment, and list the application's audit trail.
"""

from fastapi import APIRouter, Depends, Query

from src.config import settings
from src.domains.risk.config import RiskEngineConfig
from src.domains.risk.engine import RiskAssessmentEngine
from src.domains.risk.models import RiskAssessmentInput
from src.domains.risk.service import RiskAssessmentService

router = APIRouter(prefix="/api/v1/account-opening", tags=["account-opening"])

# Module-level singleton (overridden through dependency_overrides in tests)
_risk_service = RiskAssessmentService(RiskAssessmentEngine(config=RiskEngineConfig.from_env()))


def get_risk_service() -> RiskAssessmentService:
    return _risk_service


@router.post("/applications/{application_id}/risk-assessment")
async def perform_risk_assessment(
    application_id: str,
    data: RiskAssessmentInput,
    assessed_by: str | None = Query(default=None, min_length=1),
    service: RiskAssessmentService = Depends(get_risk_service),  # noqa: B008
) -> dict:
    """Run the risk engine once for an application and store the result."""
    result = service.perform_assessment(
        application_id,
        data,
        assessed_by=assessed_by or settings.default_assessed_by,
    )
    return result.model_dump(mode="json")


@router.get("/applications/{application_id}/risk-assessment")
async def get_risk_assessment(
    application_id: str,
    service: RiskAssessmentService = Depends(get_risk_service),  # noqa: B008
) -> dict:
    """Stored risk assessment with its full factor breakdown."""
    return service.get_assessment(application_id).model_dump(mode="json")


@router.get("/applications/{application_id}/audit-trail")
async def get_audit_trail(
    application_id: str,
    service: RiskAssessmentService = Depends(get_risk_service),  # noqa: B008
) -> dict:
    entries = service.get_audit_trail(application_id)
    return {
        "items": [e.model_dump(mode="json") for e in entries],
        "total": len(entries),
    }
