"""Global exception handling.

Domain errors carry their own error code; other built-in errors fall back
to the generic mapping (ValueError -> 400, LookupError -> 404).
"""

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse

from src.domains.risk.exceptions import (
    ApplicationNotReadyError,
    AssessmentAlreadyExistsError,
    AssessmentNotFoundError,
    RiskAssessmentFailedError,
)

logger = structlog.get_logger()

# (exception type, status code, error code), checked in order
_ERROR_MAP: list[tuple[type[Exception], int, str]] = [
    (ApplicationNotReadyError, 400, "application_not_ready"),
    (AssessmentAlreadyExistsError, 400, "assessment_exists"),
    (AssessmentNotFoundError, 404, "assessment_not_found"),
    (RiskAssessmentFailedError, 500, "assessment_failed"),
    (ValueError, 400, "bad_request"),
    (PermissionError, 403, "forbidden"),
    (LookupError, 404, "not_found"),
]


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = getattr(request.state, "request_id", "unknown")

    for exc_type, status_code, error in _ERROR_MAP:
        if isinstance(exc, exc_type):
            if status_code >= 500:
                logger.error(error, request_id=request_id, error=str(exc), exc_info=exc)
            else:
                logger.warning(error, request_id=request_id, error=str(exc))
            return JSONResponse(
                status_code=status_code,
                content={"error": error, "message": str(exc), "request_id": request_id},
            )

    logger.error("unhandled_exception", request_id=request_id, error=str(exc), exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred",
            "request_id": request_id,
        },
    )
