"""Category risk assessors package.

Exports ALL_ASSESSORS (assessor instances in evaluation order) and the
individual assessor classes for direct use.
"""

from .base import RiskAssessor
from .behavioral import BehavioralAssessor, email_domain, is_suspicious_phone
from .business import BusinessAssessor, calculate_business_age
from .documents import DocumentAssessor
from .financial import FinancialAssessor
from .geographic import GeographicAssessor, select_address
from .identity import IdentityAssessor, calculate_age
from .signers import SignersAssessor

# Evaluation order fixes the order of factors in every result
ALL_ASSESSORS: list[RiskAssessor] = [
    IdentityAssessor(),
    FinancialAssessor(),
    BusinessAssessor(),
    DocumentAssessor(),
    GeographicAssessor(),
    BehavioralAssessor(),
    SignersAssessor(),
]

__all__ = [
    "ALL_ASSESSORS",
    "RiskAssessor",
    "BehavioralAssessor",
    "BusinessAssessor",
    "DocumentAssessor",
    "FinancialAssessor",
    "GeographicAssessor",
    "IdentityAssessor",
    "SignersAssessor",
    "calculate_age",
    "calculate_business_age",
    "email_domain",
    "is_suspicious_phone",
    "select_address",
]
