"""Risk assessment engine configuration with sensible defaults.

Every threshold, score, weight, and keyword list used by the category
assessors lives here so that tests and deployments can override them
without touching the assessors. Keyword sets double as the single source
of truth for the label matching done by the recommendation generator and
the manual-review decider.
"""

import os
from dataclasses import dataclass, field

from .models import RiskCategory


@dataclass
class IdentityThresholds:
    strong_confidence: float = 0.9
    moderate_confidence: float = 0.7
    young_age: int = 21
    elderly_age: int = 80


@dataclass
class FinancialThresholds:
    high_debt_to_income: float = 0.5
    moderate_debt_to_income: float = 0.3
    strong_asset_to_income: float = 2.0
    limited_asset_to_income: float = 0.5
    established_banking_years: float = 5.0
    limited_banking_years: float = 1.0
    low_income: float = 25_000.0
    high_income: float = 150_000.0


@dataclass
class BusinessThresholds:
    new_business_years: float = 1.0
    established_business_years: float = 5.0
    high_monthly_volume: float = 500_000.0
    low_monthly_volume: float = 10_000.0
    low_balance_to_volume: float = 0.1
    high_balance_to_volume: float = 1.0
    high_risk_industries: tuple[str, ...] = (
        "cannabis",
        "cryptocurrency",
        "gambling",
        "adult entertainment",
        "pawn shops",
        "check cashing",
        "money services",
        "firearms",
    )


@dataclass
class DocumentThresholds:
    excellent_verification_rate: float = 0.9
    good_verification_rate: float = 0.7


@dataclass
class GeographicConfig:
    high_risk_states: tuple[str, ...] = ("FL", "NV", "DE", "MT", "WY")
    domestic_countries: tuple[str, ...] = ("US", "USA")
    high_risk_countries: tuple[str, ...] = ("RU", "CN", "KP", "IR", "CU", "SY")


@dataclass
class BehavioralConfig:
    disposable_email_markers: tuple[str, ...] = (
        "tempmail",
        "10minutemail",
        "guerrillamail",
        "mailinator",
    )
    personal_email_domains: tuple[str, ...] = (
        "gmail.com",
        "yahoo.com",
        "hotmail.com",
        "outlook.com",
    )
    # Minimum run length of one repeated digit
    repeated_digit_run: int = 4
    sequential_digit_patterns: tuple[str, ...] = (
        "1234",
        "2345",
        "3456",
        "4567",
        "5678",
        "6789",
    )


@dataclass
class SignerThresholds:
    max_signers: int = 5
    max_total_ownership: float = 100.0
    min_total_ownership: float = 25.0
    beneficial_owner_role: str = "beneficial_owner"


@dataclass
class ClassificationThresholds:
    low_max: int = 30
    medium_max: int = 65
    # Score and level used when no factor was produced at all
    empty_score: int = 50


@dataclass
class ReviewConfig:
    # Factors scoring above this get factor-specific recommendations
    recommendation_score_floor: int = 70
    critical_keywords: tuple[str, ...] = ("OFAC", "sanctions", "High-risk country")
    critical_score: int = 90
    elevated_score_floor: int = 60
    elevated_factor_count: int = 3


@dataclass
class RecommendationConfig:
    """Baseline recommendations per classification and per-factor triggers.

    ``factor_triggers`` maps a risk category to ordered (label keyword,
    recommendation) pairs; the first keyword found in a factor label wins.
    """

    baseline: dict[str, tuple[str, ...]] = field(
        default_factory=lambda: {
            "low": (
                "Proceed with standard approval process",
                "Standard monitoring procedures apply",
            ),
            "medium": (
                "Enhanced due diligence recommended",
                "Consider additional documentation requirements",
                "Implement enhanced transaction monitoring",
            ),
            "high": (
                "Manual review required before approval",
                "Senior management approval needed",
                "Enhanced ongoing monitoring required",
                "Consider risk-based account restrictions",
            ),
        }
    )
    factor_triggers: dict[RiskCategory, tuple[tuple[str, str], ...]] = field(
        default_factory=lambda: {
            RiskCategory.IDENTITY: (
                ("OFAC", "Compliance team review required for sanctions screening match"),
                ("failed", "Additional identity verification documents required"),
            ),
            RiskCategory.BUSINESS: (
                ("cash-intensive", "Implement cash transaction reporting and monitoring"),
                ("high-risk industry", "Industry-specific compliance procedures required"),
            ),
            RiskCategory.DOCUMENTATION: (
                (
                    "No documents",
                    "Require submission of standard identity and address verification documents",
                ),
                ("verification issues", "Request alternative or additional verification documents"),
            ),
            RiskCategory.GEOGRAPHIC: (
                ("High-risk country", "Enhanced CDD and source of funds documentation required"),
            ),
            RiskCategory.FINANCIAL: (
                ("debt-to-income", "Review financial capacity and consider lower account limits"),
            ),
        }
    )


@dataclass
class RiskEngineConfig:
    identity: IdentityThresholds = field(default_factory=IdentityThresholds)
    financial: FinancialThresholds = field(default_factory=FinancialThresholds)
    business: BusinessThresholds = field(default_factory=BusinessThresholds)
    documents: DocumentThresholds = field(default_factory=DocumentThresholds)
    geographic: GeographicConfig = field(default_factory=GeographicConfig)
    behavioral: BehavioralConfig = field(default_factory=BehavioralConfig)
    signers: SignerThresholds = field(default_factory=SignerThresholds)
    classification: ClassificationThresholds = field(default_factory=ClassificationThresholds)
    review: ReviewConfig = field(default_factory=ReviewConfig)
    recommendations: RecommendationConfig = field(default_factory=RecommendationConfig)

    def __post_init__(self) -> None:
        c = self.classification
        if not 0 <= c.low_max < c.medium_max <= 100:
            raise ValueError(
                f"Classification thresholds must satisfy 0 <= low_max < medium_max <= 100, "
                f"got low_max={c.low_max}, medium_max={c.medium_max}"
            )

    @classmethod
    def from_env(cls) -> "RiskEngineConfig":
        """Load config with env var overrides. Env vars use RISK_ prefix.

        List-valued settings are comma-separated.
        """
        config = cls()

        # Classification overrides
        if v := os.getenv("RISK_LOW_MAX"):
            config.classification.low_max = int(v)
        if v := os.getenv("RISK_MEDIUM_MAX"):
            config.classification.medium_max = int(v)

        # Review overrides
        if v := os.getenv("RISK_CRITICAL_SCORE"):
            config.review.critical_score = int(v)
        if v := os.getenv("RISK_ELEVATED_FACTOR_COUNT"):
            config.review.elevated_factor_count = int(v)

        # Keyword list overrides
        if v := os.getenv("RISK_HIGH_RISK_INDUSTRIES"):
            config.business.high_risk_industries = _split(v)
        if v := os.getenv("RISK_HIGH_RISK_STATES"):
            config.geographic.high_risk_states = _split(v)
        if v := os.getenv("RISK_HIGH_RISK_COUNTRIES"):
            config.geographic.high_risk_countries = _split(v)
        if v := os.getenv("RISK_DISPOSABLE_EMAIL_MARKERS"):
            config.behavioral.disposable_email_markers = _split(v)

        config.__post_init__()
        return config


def _split(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


# Module-level default instance
default_config = RiskEngineConfig()
