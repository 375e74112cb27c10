"""Geographic risk assessment based on the applicant's address."""

from datetime import datetime

from ..config import RiskEngineConfig
from ..models import (
    AccountType,
    Address,
    RiskAssessmentInput,
    RiskCategory,
    RiskFactor,
    RiskImpact,
)
from .base import RiskAssessor


def select_address(data: RiskAssessmentInput) -> Address | None:
    """Mailing address for consumer accounts, business address otherwise."""
    if data.account_type == AccountType.CONSUMER:
        if data.personal_info is None:
            return None
        return data.personal_info.mailing_address
    if data.business_profile is None:
        return None
    return data.business_profile.business_address


class GeographicAssessor(RiskAssessor):
    """Scores state and country of the selected address.

    An address without state or country yields a single factor and stops.
    """

    assessor_id = "geographic"
    category = RiskCategory.GEOGRAPHIC

    def assess(
        self,
        data: RiskAssessmentInput,
        config: RiskEngineConfig,
        as_of: datetime,
    ) -> list[RiskFactor]:
        address = select_address(data)
        if address is None:
            return []
        return self.assess_address(address, config)

    def assess_address(self, address: Address, config: RiskEngineConfig) -> list[RiskFactor]:
        if not address.state or not address.country:
            return [
                self._factor(
                    "Incomplete address information", 0.15, 50, RiskImpact.NEGATIVE,
                    "Address information is incomplete or missing",
                )
            ]

        g = config.geographic
        factors: list[RiskFactor] = []

        if address.state in g.high_risk_states:
            factors.append(
                self._factor(
                    "High-risk state location", 0.2, 40, RiskImpact.NEGATIVE,
                    f"Located in {address.state}, which has elevated financial crime risk",
                )
            )
        else:
            factors.append(
                self._factor(
                    "Standard geographic risk", 0.1, 15, RiskImpact.POSITIVE,
                    "Located in low-risk geographic area",
                )
            )

        if address.country not in g.domestic_countries:
            if address.country in g.high_risk_countries:
                factors.append(
                    self._factor(
                        "High-risk country", 0.4, 85, RiskImpact.NEGATIVE,
                        f"Address in {address.country} poses significant compliance risk",
                    )
                )
            else:
                factors.append(
                    self._factor(
                        "International address", 0.2, 35, RiskImpact.NEGATIVE,
                        f"International address in {address.country} requires enhanced due diligence",
                    )
                )

        return factors
