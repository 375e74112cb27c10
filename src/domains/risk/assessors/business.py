"""Business profile risk assessment for commercial and business accounts."""

from datetime import date, datetime

from ..config import RiskEngineConfig
from ..models import AccountType, RiskAssessmentInput, RiskCategory, RiskFactor, RiskImpact
from .base import RiskAssessor

DAYS_PER_YEAR = 365.25


def calculate_business_age(date_established: date, as_of: date) -> float:
    """Fractional years since establishment."""
    return (as_of - date_established).days / DAYS_PER_YEAR


class BusinessAssessor(RiskAssessor):
    """Scores cash handling, business maturity, industry, and transaction profile."""

    assessor_id = "business"
    category = RiskCategory.BUSINESS

    def assess(
        self,
        data: RiskAssessmentInput,
        config: RiskEngineConfig,
        as_of: datetime,
    ) -> list[RiskFactor]:
        profile = data.business_profile
        if profile is None or data.account_type == AccountType.CONSUMER:
            return []

        t = config.business
        factors: list[RiskFactor] = []

        if profile.is_cash_intensive:
            factors.append(
                self._factor(
                    "Cash-intensive business model", 0.3, 75, RiskImpact.NEGATIVE,
                    "Cash-intensive businesses have higher money laundering risk",
                )
            )
        else:
            factors.append(
                self._factor(
                    "Non-cash-intensive business model", 0.15, 15, RiskImpact.POSITIVE,
                    "Business model has lower cash handling risk",
                )
            )

        age = calculate_business_age(profile.date_established, as_of.date())
        factors += self._first_match(
            [
                (
                    age < t.new_business_years,
                    self._factor(
                        "New business entity", 0.2, 60, RiskImpact.NEGATIVE,
                        "Business established less than 1 year ago",
                    ),
                ),
                (
                    age >= t.established_business_years,
                    self._factor(
                        "Established business", 0.15, 10, RiskImpact.POSITIVE,
                        f"Business operating for {age:.1f} years",
                    ),
                ),
                (
                    True,
                    self._factor(
                        "Developing business", 0.1, 25, RiskImpact.NEUTRAL,
                        f"Business operating for {age:.1f} years",
                    ),
                ),
            ]
        )

        industry = profile.industry_type
        if any(keyword.lower() in industry.lower() for keyword in t.high_risk_industries):
            factors.append(
                self._factor(
                    "High-risk industry", 0.35, 80, RiskImpact.NEGATIVE,
                    f"{industry} is classified as high-risk industry",
                )
            )
        else:
            factors.append(
                self._factor(
                    "Standard industry risk", 0.1, 20, RiskImpact.NEUTRAL,
                    f"{industry} has standard industry risk profile",
                )
            )

        volume = profile.monthly_transaction_volume
        if volume > t.high_monthly_volume:
            factors.append(
                self._factor(
                    "High transaction volume", 0.2, 45, RiskImpact.NEGATIVE,
                    f"Monthly transaction volume of ${volume:,.0f} requires enhanced monitoring",
                )
            )
        elif volume < t.low_monthly_volume:
            factors.append(
                self._factor(
                    "Low transaction volume", 0.1, 15, RiskImpact.POSITIVE,
                    f"Low monthly transaction volume of ${volume:,.0f}",
                )
            )

        # Ratio undefined without volume
        if volume > 0:
            balance_ratio = profile.expected_balance / volume
            if balance_ratio < t.low_balance_to_volume:
                factors.append(
                    self._factor(
                        "Low balance-to-volume ratio", 0.15, 40, RiskImpact.NEGATIVE,
                        "Expected balance is low relative to transaction volume",
                    )
                )
            elif balance_ratio > t.high_balance_to_volume:
                factors.append(
                    self._factor(
                        "High balance-to-volume ratio", 0.1, 10, RiskImpact.POSITIVE,
                        "Expected balance is healthy relative to transaction volume",
                    )
                )

        return factors
