"""Unit tests for the manual-review decision."""

import pytest

from src.domains.risk.models import RiskCategory, RiskFactor, RiskImpact, RiskLevel
from src.domains.risk.review import requires_manual_review


def _factor(
    score: int,
    label: str = "Generic factor",
    impact: RiskImpact = RiskImpact.NEGATIVE,
) -> RiskFactor:
    return RiskFactor(
        category=RiskCategory.BEHAVIORAL,
        factor=label,
        weight=0.1,
        score=score,
        impact=impact,
        description="test",
    )


class TestRequiresManualReview:
    def test_high_level_always_reviewed(self):
        assert requires_manual_review([], RiskLevel.HIGH) is True

    def test_low_level_without_findings(self):
        assert requires_manual_review([_factor(10), _factor(20)], RiskLevel.LOW) is False

    @pytest.mark.parametrize(
        "label",
        ["OFAC screening match", "Possible sanctions hit", "High-risk country", "ofac alert"],
    )
    def test_adverse_keyword_factor(self, label):
        assert requires_manual_review([_factor(40, label)], RiskLevel.LOW) is True

    def test_clean_ofac_screening_does_not_trigger(self):
        clean = _factor(5, "Clean OFAC screening", RiskImpact.POSITIVE)
        assert requires_manual_review([clean], RiskLevel.LOW) is False

    @pytest.mark.parametrize("score,expected", [(89, False), (90, True)])
    def test_critical_score(self, score, expected):
        assert requires_manual_review([_factor(score)], RiskLevel.MEDIUM) is expected

    def test_three_elevated_factors(self):
        factors = [_factor(61), _factor(70), _factor(75)]
        assert requires_manual_review(factors, RiskLevel.MEDIUM) is True

    def test_two_elevated_factors_not_enough(self):
        factors = [_factor(61), _factor(70), _factor(60)]
        assert requires_manual_review(factors, RiskLevel.MEDIUM) is False
