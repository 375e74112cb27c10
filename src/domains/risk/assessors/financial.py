"""Financial profile risk assessment."""

from datetime import datetime

import structlog

from ..config import RiskEngineConfig
from ..models import FinancialProfile, RiskAssessmentInput, RiskCategory, RiskFactor, RiskImpact
from .base import RiskAssessor

logger = structlog.get_logger()


def _average_banking_years(profile: FinancialProfile) -> float | None:
    relationships = profile.banking_relationships
    if not relationships:
        return None
    return sum(r.years_with_bank or 0 for r in relationships) / len(relationships)


class FinancialAssessor(RiskAssessor):
    """Scores leverage, income diversity, asset base, banking history, and income.

    Each sub-check is independent. Ratio checks are skipped when annual
    income is not positive, since the ratio is undefined.
    """

    assessor_id = "financial"
    category = RiskCategory.FINANCIAL

    def assess(
        self,
        data: RiskAssessmentInput,
        config: RiskEngineConfig,
        as_of: datetime,
    ) -> list[RiskFactor]:
        profile = data.financial_profile
        if profile is None:
            return []

        t = config.financial
        factors: list[RiskFactor] = []
        income = profile.annual_income

        if income > 0:
            dti = profile.liabilities / income
            factors += self._first_match(
                [
                    (
                        dti > t.high_debt_to_income,
                        self._factor(
                            "High debt-to-income ratio", 0.25, 70, RiskImpact.NEGATIVE,
                            f"Debt-to-income ratio of {dti * 100:.1f}% exceeds prudent limits",
                        ),
                    ),
                    (
                        dti > t.moderate_debt_to_income,
                        self._factor(
                            "Moderate debt-to-income ratio", 0.15, 35, RiskImpact.NEUTRAL,
                            f"Debt-to-income ratio of {dti * 100:.1f}% is manageable",
                        ),
                    ),
                    (
                        True,
                        self._factor(
                            "Low debt-to-income ratio", 0.15, 15, RiskImpact.POSITIVE,
                            f"Healthy debt-to-income ratio of {dti * 100:.1f}%",
                        ),
                    ),
                ]
            )
        else:
            logger.warning("income_ratios_undefined", annual_income=income)

        sources = profile.income_source
        if sources == ["employment"]:
            factors.append(
                self._factor(
                    "Single income source", 0.1, 25, RiskImpact.NEUTRAL,
                    "Relies solely on employment income",
                )
            )
        elif len(sources) > 1:
            factors.append(
                self._factor(
                    "Diversified income sources", 0.1, 15, RiskImpact.POSITIVE,
                    "Multiple income sources provide stability",
                )
            )

        if income > 0:
            asset_ratio = profile.assets / income
            if asset_ratio > t.strong_asset_to_income:
                factors.append(
                    self._factor(
                        "Strong asset base", 0.2, 10, RiskImpact.POSITIVE,
                        "Strong asset-to-income ratio indicates financial stability",
                    )
                )
            elif asset_ratio < t.limited_asset_to_income:
                factors.append(
                    self._factor(
                        "Limited asset base", 0.15, 45, RiskImpact.NEGATIVE,
                        "Low asset-to-income ratio may indicate financial instability",
                    )
                )

        avg_years = _average_banking_years(profile)
        if avg_years is not None:
            if avg_years >= t.established_banking_years:
                factors.append(
                    self._factor(
                        "Established banking relationships", 0.15, 10, RiskImpact.POSITIVE,
                        f"Average {avg_years:.1f} years with existing banks",
                    )
                )
            elif avg_years < t.limited_banking_years:
                factors.append(
                    self._factor(
                        "Limited banking history", 0.15, 50, RiskImpact.NEGATIVE,
                        "Minimal banking relationship history",
                    )
                )

        if income < t.low_income:
            factors.append(
                self._factor(
                    "Low income level", 0.1, 40, RiskImpact.NEGATIVE,
                    f"Income below ${t.low_income:,.0f} increases default risk",
                )
            )
        elif income > t.high_income:
            factors.append(
                self._factor(
                    "High income level", 0.1, 5, RiskImpact.POSITIVE,
                    "High income level reduces default risk",
                )
            )

        return factors
