"""Uploaded-document verification risk assessment."""

from datetime import datetime

from ..config import RiskEngineConfig
from ..models import (
    DocumentStatus,
    RiskAssessmentInput,
    RiskCategory,
    RiskFactor,
    RiskImpact,
)
from .base import RiskAssessor


class DocumentAssessor(RiskAssessor):
    """Scores verification coverage, pending checks, and quality issues.

    An empty document list is a single strong negative; otherwise the
    verification-rate tiers are first-match and the pending and quality
    factors may co-occur with them.
    """

    assessor_id = "documents"
    category = RiskCategory.DOCUMENTATION

    def assess(
        self,
        data: RiskAssessmentInput,
        config: RiskEngineConfig,
        as_of: datetime,
    ) -> list[RiskFactor]:
        documents = data.documents
        if documents is None:
            return []

        if not documents:
            return [
                self._factor(
                    "No documents uploaded", 0.3, 80, RiskImpact.NEGATIVE,
                    "No supporting documents have been uploaded",
                )
            ]

        t = config.documents
        statuses = [doc.verification_status for doc in documents]
        total = len(statuses)
        verified = statuses.count(DocumentStatus.VERIFIED)
        pending = statuses.count(DocumentStatus.PENDING)
        failed = sum(1 for s in statuses if s in (DocumentStatus.FAILED, DocumentStatus.REJECTED))
        rate = verified / total

        factors = self._first_match(
            [
                (
                    rate >= t.excellent_verification_rate,
                    self._factor(
                        "Excellent document verification", 0.2, 5, RiskImpact.POSITIVE,
                        f"{verified}/{total} documents successfully verified",
                    ),
                ),
                (
                    rate >= t.good_verification_rate,
                    self._factor(
                        "Good document verification", 0.15, 20, RiskImpact.POSITIVE,
                        f"{verified}/{total} documents successfully verified",
                    ),
                ),
                (
                    failed > 0,
                    self._factor(
                        "Document verification issues", 0.25, 65, RiskImpact.NEGATIVE,
                        f"{failed} document(s) failed verification",
                    ),
                ),
            ]
        )

        if pending > 0:
            factors.append(
                self._factor(
                    "Pending document verification", 0.1, 30, RiskImpact.NEUTRAL,
                    f"{pending} document(s) still pending verification",
                )
            )

        with_issues = sum(
            1
            for doc in documents
            if doc.verification_details is not None and doc.verification_details.issues
        )
        if with_issues > 0:
            factors.append(
                self._factor(
                    "Document quality concerns", 0.15, 45, RiskImpact.NEGATIVE,
                    f"{with_issues} document(s) have quality or authenticity concerns",
                )
            )

        return factors
