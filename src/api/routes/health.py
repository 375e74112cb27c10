"""Health and readiness endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.api.routes.risk_assessment import get_risk_service
from src.config import settings
from src.domains.risk.service import RiskAssessmentService

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    from src.main import get_uptime

    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "uptime_seconds": get_uptime(),
    }


@router.get("/ready")
async def ready(
    service: RiskAssessmentService = Depends(get_risk_service),  # noqa: B008
) -> JSONResponse:
    """Ready once the risk engine has at least one assessor registered."""
    engine = service.engine
    assessors = engine.assessor_ids
    classification = engine.config.classification
    all_ready = bool(assessors)

    return JSONResponse(
        status_code=200 if all_ready else 503,
        content={
            "status": "ready" if all_ready else "degraded",
            "assessors": assessors,
            "thresholds": {
                "low_max": classification.low_max,
                "medium_max": classification.medium_max,
            },
        },
    )
