"""FastAPI application entry point for the account-opening risk service."""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.middleware.error_handler import global_exception_handler
from src.api.middleware.logging import StructuredLoggingMiddleware
from src.api.routes.health import router as health_router
from src.api.routes.risk_assessment import get_risk_service
from src.api.routes.risk_assessment import router as risk_assessment_router
from src.config import settings
from src.domains.risk.exceptions import RiskAssessmentError
from src.shared.logging import setup_logging

logger = structlog.get_logger()

# Track app start time for uptime calculation
APP_START_TIME: float = 0.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown logic."""
    global APP_START_TIME
    APP_START_TIME = time.time()
    setup_logging(settings.log_level, json_logs=settings.log_json)

    logger.info(
        "service_starting",
        app_name=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
    )

    engine = get_risk_service().engine
    logger.info(
        "risk_engine_loaded",
        assessors=engine.assessor_ids,
        low_max=engine.config.classification.low_max,
        medium_max=engine.config.classification.medium_max,
    )

    yield

    logger.info("service_shutting_down")


app = FastAPI(
    title="Account Opening Risk Service",
    description="Risk assessment engine for retail and business account-opening applications",
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Structured logging middleware
app.add_middleware(StructuredLoggingMiddleware)

# Exception handlers: specific types are answered in-app, Exception is the last resort
app.add_exception_handler(RiskAssessmentError, global_exception_handler)
app.add_exception_handler(ValueError, global_exception_handler)
app.add_exception_handler(LookupError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# Register routers
app.include_router(health_router)
app.include_router(risk_assessment_router)


def get_uptime() -> int:
    """Get application uptime in seconds."""
    if APP_START_TIME == 0.0:
        return 0
    return int(time.time() - APP_START_TIME)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
