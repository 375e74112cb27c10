"""Identity and KYC verification risk assessment."""

from datetime import date, datetime

from ..config import RiskEngineConfig
from ..models import (
    KYCStatus,
    KYCVerification,
    RiskAssessmentInput,
    RiskCategory,
    RiskFactor,
    RiskImpact,
)
from .base import RiskAssessor


def calculate_age(date_of_birth: date, as_of: date) -> int:
    """Whole years elapsed, not counting a birthday not yet reached this year."""
    age = as_of.year - date_of_birth.year
    if (as_of.month, as_of.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def _ofac_match(kyc: KYCVerification) -> bool:
    if kyc.results is None or kyc.results.ofac is None:
        return False
    return kyc.results.ofac.passed is False


class IdentityAssessor(RiskAssessor):
    """Scores KYC outcome, sanctions screening, and applicant age.

    Runs only when both personal info and a KYC verification are on file.
    """

    assessor_id = "identity"
    category = RiskCategory.IDENTITY

    def assess(
        self,
        data: RiskAssessmentInput,
        config: RiskEngineConfig,
        as_of: datetime,
    ) -> list[RiskFactor]:
        info = data.personal_info
        kyc = data.kyc_verification
        if info is None or kyc is None:
            return []

        t = config.identity
        passed = kyc.status == KYCStatus.PASSED
        factors = self._first_match(
            [
                (
                    passed and kyc.confidence >= t.strong_confidence,
                    self._factor(
                        "Strong identity verification", 0.3, 10, RiskImpact.POSITIVE,
                        "Identity verification passed with high confidence",
                    ),
                ),
                (
                    passed and kyc.confidence >= t.moderate_confidence,
                    self._factor(
                        "Moderate identity verification", 0.3, 30, RiskImpact.NEUTRAL,
                        "Identity verification passed but with moderate confidence",
                    ),
                ),
                (
                    kyc.status == KYCStatus.NEEDS_REVIEW,
                    self._factor(
                        "Identity verification requires review", 0.3, 60, RiskImpact.NEGATIVE,
                        "Identity verification flagged for manual review",
                    ),
                ),
                (
                    kyc.status == KYCStatus.FAILED,
                    self._factor(
                        "Failed identity verification", 0.3, 90, RiskImpact.NEGATIVE,
                        "Identity verification failed",
                    ),
                ),
            ]
        )

        if _ofac_match(kyc):
            factors.append(
                self._factor(
                    "OFAC screening match", 0.4, 95, RiskImpact.NEGATIVE,
                    "Applicant matched against sanctions lists",
                )
            )
        else:
            factors.append(
                self._factor(
                    "Clean OFAC screening", 0.2, 5, RiskImpact.POSITIVE,
                    "No matches found in sanctions screening",
                )
            )

        age = calculate_age(info.date_of_birth, as_of.date())
        factors += self._first_match(
            [
                (
                    age < t.young_age,
                    self._factor(
                        "Young applicant age", 0.1, 40, RiskImpact.NEGATIVE,
                        f"Applicant under {t.young_age} years old - higher risk profile",
                    ),
                ),
                (
                    age > t.elderly_age,
                    self._factor(
                        "Elderly applicant age", 0.1, 25, RiskImpact.NEGATIVE,
                        "Elderly applicant - potential vulnerability concerns",
                    ),
                ),
                (
                    True,
                    self._factor(
                        "Standard applicant age", 0.1, 10, RiskImpact.POSITIVE,
                        "Applicant age within standard range",
                    ),
                ),
            ]
        )
        return factors
