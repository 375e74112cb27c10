"""Unit tests for the geographic assessor."""

from datetime import UTC, datetime

import pytest

from src.domains.risk.assessors.geographic import GeographicAssessor, select_address
from src.domains.risk.config import RiskEngineConfig
from src.domains.risk.models import Address, RiskAssessmentInput

CONFIG = RiskEngineConfig()
NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=UTC)
ASSESSOR = GeographicAssessor()


def _make_input(
    mailing: dict | None = None,
    business: dict | None = None,
    account_type: str | None = None,
) -> RiskAssessmentInput:
    data: dict = {"account_type": account_type or ("commercial" if business else "consumer")}
    if mailing is not None:
        data["personal_info"] = {"date_of_birth": "1985-03-15", "mailing_address": mailing}
    if business is not None:
        data["business_profile"] = {"date_established": "2015-01-01", "business_address": business}
    return RiskAssessmentInput.model_validate(data)


def _labels(factors) -> list[str]:
    return [f.factor for f in factors]


class TestSelectAddress:
    BOTH = {"mailing": {"state": "CA", "country": "US"}, "business": {"state": "FL", "country": "US"}}

    def test_consumer_uses_mailing_address(self):
        data = _make_input(**self.BOTH, account_type="consumer")
        assert select_address(data).state == "CA"

    @pytest.mark.parametrize("account_type", ["commercial", "business"])
    def test_non_consumer_uses_business_address(self, account_type):
        data = _make_input(**self.BOTH, account_type=account_type)
        assert select_address(data).state == "FL"

    def test_non_consumer_without_business_profile(self):
        data = _make_input(mailing={"state": "CA", "country": "US"}, account_type="commercial")
        assert select_address(data) is None

    def test_consumer_ignores_business_address(self):
        data = _make_input(business={"state": "FL", "country": "US"}, account_type="consumer")
        assert select_address(data) is None

    def test_none_when_no_address(self):
        assert select_address(_make_input()) is None


class TestGeographicAssessor:
    def test_no_address_emits_nothing(self):
        assert ASSESSOR.assess(_make_input(), CONFIG, NOW) == []

    @pytest.mark.parametrize(
        "address",
        [{"state": "CA"}, {"country": "US"}, {"state": "", "country": "US"}, {}],
    )
    def test_incomplete_address_stops(self, address):
        factors = ASSESSOR.assess(_make_input(mailing=address), CONFIG, NOW)
        assert _labels(factors) == ["Incomplete address information"]
        assert factors[0].score == 50

    @pytest.mark.parametrize("state", ["FL", "NV", "DE", "MT", "WY"])
    def test_high_risk_state(self, state):
        factors = ASSESSOR.assess_address(Address(state=state, country="US"), CONFIG)
        assert _labels(factors) == ["High-risk state location"]
        assert factors[0].score == 40
        assert state in factors[0].description

    def test_standard_state(self):
        factors = ASSESSOR.assess_address(Address(state="CA", country="USA"), CONFIG)
        assert _labels(factors) == ["Standard geographic risk"]
        assert factors[0].score == 15

    @pytest.mark.parametrize("country", ["RU", "CN", "KP", "IR", "CU", "SY"])
    def test_high_risk_country(self, country):
        factors = ASSESSOR.assess_address(Address(state="ON", country=country), CONFIG)
        assert _labels(factors) == ["Standard geographic risk", "High-risk country"]
        assert factors[1].score == 85
        assert factors[1].weight == 0.4

    def test_other_international_address(self):
        factors = ASSESSOR.assess_address(Address(state="ON", country="CA"), CONFIG)
        assert _labels(factors) == ["Standard geographic risk", "International address"]
        assert factors[1].score == 35

    def test_business_address_used_for_commercial_without_mailing(self):
        factors = ASSESSOR.assess(
            _make_input(business={"state": "NV", "country": "US"}), CONFIG, NOW
        )
        assert _labels(factors) == ["High-risk state location"]

    def test_commercial_scored_on_business_address_over_mailing(self):
        data = _make_input(
            mailing={"state": "CA", "country": "US"},
            business={"state": "FL", "country": "US"},
            account_type="commercial",
        )
        assert _labels(ASSESSOR.assess(data, CONFIG, NOW)) == ["High-risk state location"]
