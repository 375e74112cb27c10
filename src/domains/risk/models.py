"""Pydantic models for the account-opening risk domain.

Input models accept both snake_case field names and the camelCase keys used
by the upstream application store (``personalInfo``, ``dateOfBirth``, ...).
"""

from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RiskCategory(StrEnum):
    IDENTITY = "Identity"
    FINANCIAL = "Financial"
    BUSINESS = "Business"
    DOCUMENTATION = "Documentation"
    GEOGRAPHIC = "Geographic"
    BEHAVIORAL = "Behavioral"
    SIGNERS = "Signers"


class RiskImpact(StrEnum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class RiskLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AccountType(StrEnum):
    CONSUMER = "consumer"
    COMMERCIAL = "commercial"
    BUSINESS = "business"


class KYCStatus(StrEnum):
    PASSED = "passed"
    NEEDS_REVIEW = "needs_review"
    FAILED = "failed"
    PENDING = "pending"


class DocumentStatus(StrEnum):
    VERIFIED = "verified"
    PENDING = "pending"
    FAILED = "failed"
    REJECTED = "rejected"


class _InputModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ---------------------------------------------------------------------------
# Assessment input
# ---------------------------------------------------------------------------


class Address(_InputModel):
    model_config = ConfigDict(extra="allow")

    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None


class PersonalInfo(_InputModel):
    first_name: str = ""
    last_name: str = ""
    date_of_birth: date
    ssn: str = ""
    phone: str = ""
    email: str = ""
    mailing_address: Address | None = None
    physical_address: Address | None = None
    employment_status: str = ""
    occupation: str | None = None
    employer: str | None = None


class BusinessProfile(_InputModel):
    business_name: str = ""
    ein: str = ""
    entity_type: str = ""
    industry_type: str = ""
    date_established: date
    business_address: Address | None = None
    is_cash_intensive: bool = False
    monthly_transaction_volume: float = 0.0
    monthly_transaction_count: int = 0
    expected_balance: float = 0.0


class BankingRelationship(_InputModel):
    bank_name: str | None = None
    account_types: list[str] = Field(default_factory=list)
    years_with_bank: float | None = None


class FinancialProfile(_InputModel):
    annual_income: float
    income_source: list[str] = Field(default_factory=list)
    assets: float = 0.0
    liabilities: float = 0.0
    banking_relationships: list[BankingRelationship] = Field(default_factory=list)
    account_activities: list[dict] = Field(default_factory=list)


class ComponentResult(_InputModel):
    passed: bool | None = None
    confidence: float | None = None


class OFACResult(_InputModel):
    passed: bool | None = None
    matches: list[dict | str] = Field(default_factory=list)


class KYCResults(_InputModel):
    identity: ComponentResult | None = None
    address: ComponentResult | None = None
    phone: ComponentResult | None = None
    email: ComponentResult | None = None
    ofac: OFACResult | None = None


class KYCVerification(_InputModel):
    status: str
    confidence: float = 0.0
    results: KYCResults | None = None


class VerificationDetails(_InputModel):
    model_config = ConfigDict(extra="allow")

    provider: str | None = None
    confidence: float | None = None
    issues: list[str] = Field(default_factory=list)


class Document(_InputModel):
    type: str = ""
    verification_status: str
    verification_details: VerificationDetails | None = None


class AdditionalSigner(_InputModel):
    personal_info: dict | None = None
    role: str = ""
    kyc_status: str = ""
    beneficial_ownership_percentage: float | None = None


class RiskAssessmentInput(_InputModel):
    """Read-only snapshot of an application, assembled by the caller."""

    personal_info: PersonalInfo | None = None
    business_profile: BusinessProfile | None = None
    financial_profile: FinancialProfile | None = None
    kyc_verification: KYCVerification | None = None
    documents: list[Document] | None = None
    additional_signers: list[AdditionalSigner] = Field(default_factory=list)
    account_type: AccountType


# ---------------------------------------------------------------------------
# Assessment output
# ---------------------------------------------------------------------------


class RiskFactor(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: RiskCategory
    factor: str
    weight: float = Field(gt=0)
    score: int
    impact: RiskImpact
    description: str

    @field_validator("score", mode="before")
    @classmethod
    def _clamp_score(cls, v: float) -> int:
        return int(min(100, max(0, v)))


class RiskAssessmentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    application_id: str
    overall_risk: RiskLevel
    risk_score: int = Field(ge=0, le=100)
    factors: list[RiskFactor]
    recommendations: list[str]
    requires_manual_review: bool
    assessed_at: datetime
    assessed_by: str = "system"


class AuditTrailEntry(BaseModel):
    application_id: str
    action: str
    description: str
    performed_by: str
    changes: dict = Field(default_factory=dict)
    created_at: datetime
