"""Unit tests for the document verification assessor."""

from datetime import UTC, datetime

import pytest

from src.domains.risk.assessors.documents import DocumentAssessor
from src.domains.risk.config import RiskEngineConfig
from src.domains.risk.models import RiskAssessmentInput, RiskImpact

CONFIG = RiskEngineConfig()
NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=UTC)
ASSESSOR = DocumentAssessor()


def _doc(status: str, issues: list[str] | None = None) -> dict:
    doc = {"type": "passport", "verification_status": status}
    if issues is not None:
        doc["verification_details"] = {"provider": "Mock Provider", "issues": issues}
    return doc


def _assess(documents):
    data = RiskAssessmentInput.model_validate(
        {"documents": documents, "account_type": "consumer"}
    )
    return ASSESSOR.assess(data, CONFIG, NOW)


def _labels(factors) -> list[str]:
    return [f.factor for f in factors]


class TestDocumentAssessor:
    def test_absent_documents_emit_nothing(self):
        assert _assess(None) == []

    def test_empty_list_is_single_strong_negative(self):
        factors = _assess([])
        assert len(factors) == 1
        assert factors[0].factor == "No documents uploaded"
        assert factors[0].score == 80
        assert factors[0].weight == 0.3
        assert factors[0].impact == RiskImpact.NEGATIVE

    def test_all_verified_is_excellent(self):
        factors = _assess([_doc("verified"), _doc("verified")])
        assert _labels(factors) == ["Excellent document verification"]
        assert factors[0].score == 5
        assert factors[0].description == "2/2 documents successfully verified"

    def test_good_verification_with_pending(self):
        docs = [_doc("verified")] * 3 + [_doc("pending")]
        factors = _assess(docs)
        assert _labels(factors) == ["Good document verification", "Pending document verification"]
        assert factors[0].score == 20
        assert factors[1].description == "1 document(s) still pending verification"

    def test_failed_documents_below_good_rate(self):
        factors = _assess([_doc("verified"), _doc("failed"), _doc("rejected")])
        assert _labels(factors) == ["Document verification issues"]
        assert factors[0].score == 65
        assert "2 document(s) failed" in factors[0].description

    def test_high_rate_wins_over_failures(self):
        docs = [_doc("verified")] * 9 + [_doc("failed")]
        assert _labels(_assess(docs)) == ["Excellent document verification"]

    def test_low_rate_without_failures_emits_no_rate_factor(self):
        factors = _assess([_doc("verified"), _doc("pending"), _doc("pending")])
        assert _labels(factors) == ["Pending document verification"]

    def test_quality_concerns_counted_per_document(self):
        docs = [
            _doc("verified", issues=["glare"]),
            _doc("verified", issues=[]),
            _doc("verified", issues=["expired", "blurry"]),
        ]
        factors = _assess(docs)
        assert _labels(factors) == ["Excellent document verification", "Document quality concerns"]
        assert factors[1].score == 45
        assert factors[1].description.startswith("2 document(s)")

    @pytest.mark.parametrize("status", ["verified", "pending", "failed"])
    def test_scores_within_bounds(self, status):
        for factor in _assess([_doc(status, issues=["x"])]):
            assert 0 <= factor.score <= 100
