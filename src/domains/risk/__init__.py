"""Account-opening risk assessment domain."""

from .assessors import ALL_ASSESSORS
from .config import RiskEngineConfig, default_config
from .engine import RiskAssessmentEngine, assess_risk
from .models import (
    AccountType,
    RiskAssessmentInput,
    RiskAssessmentResult,
    RiskCategory,
    RiskFactor,
    RiskImpact,
    RiskLevel,
)
from .service import RiskAssessmentService

__all__ = [
    "ALL_ASSESSORS",
    "AccountType",
    "RiskAssessmentEngine",
    "RiskAssessmentInput",
    "RiskAssessmentResult",
    "RiskAssessmentService",
    "RiskCategory",
    "RiskEngineConfig",
    "RiskFactor",
    "RiskImpact",
    "RiskLevel",
    "assess_risk",
    "default_config",
]
