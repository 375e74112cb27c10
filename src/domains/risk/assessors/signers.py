"""Additional signers and beneficial ownership risk assessment."""

from datetime import datetime

from ..config import RiskEngineConfig
from ..models import KYCStatus, RiskAssessmentInput, RiskCategory, RiskFactor, RiskImpact
from .base import RiskAssessor


class SignersAssessor(RiskAssessor):
    """Scores signer count, signer KYC outcomes, and disclosed ownership."""

    assessor_id = "signers"
    category = RiskCategory.SIGNERS

    def assess(
        self,
        data: RiskAssessmentInput,
        config: RiskEngineConfig,
        as_of: datetime,
    ) -> list[RiskFactor]:
        signers = data.additional_signers
        if not signers:
            return []

        t = config.signers
        factors: list[RiskFactor] = []

        if len(signers) > t.max_signers:
            factors.append(
                self._factor(
                    "Excessive number of signers", 0.2, 50, RiskImpact.NEGATIVE,
                    f"{len(signers)} signers may complicate account management",
                )
            )

        failed = sum(1 for s in signers if s.kyc_status == KYCStatus.FAILED)
        pending = sum(1 for s in signers if s.kyc_status == KYCStatus.PENDING)

        if failed > 0:
            factors.append(
                self._factor(
                    "Additional signers with KYC failures", 0.3, 75, RiskImpact.NEGATIVE,
                    f"{failed} additional signer(s) failed KYC verification",
                )
            )

        if pending > 0:
            factors.append(
                self._factor(
                    "Additional signers with pending KYC", 0.15, 35, RiskImpact.NEUTRAL,
                    f"{pending} additional signer(s) have pending KYC verification",
                )
            )

        owners = [s for s in signers if s.role == t.beneficial_owner_role]
        total_ownership = sum(o.beneficial_ownership_percentage or 0 for o in owners)

        if total_ownership > t.max_total_ownership:
            factors.append(
                self._factor(
                    "Ownership percentage exceeds 100%", 0.25, 60, RiskImpact.NEGATIVE,
                    f"Total beneficial ownership of {total_ownership:g}% exceeds 100%",
                )
            )
        elif owners and total_ownership < t.min_total_ownership:
            factors.append(
                self._factor(
                    "Low disclosed ownership percentage", 0.2, 45, RiskImpact.NEGATIVE,
                    "Total disclosed beneficial ownership is suspiciously low",
                )
            )

        return factors
