"""Shared test fixtures for the account-opening risk service tests."""

import copy
import itertools
from datetime import UTC, datetime

import pytest

from src.domains.risk.engine import RiskAssessmentEngine

NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=UTC)

LOW_RISK_APPLICATION: dict = {
    "personalInfo": {
        "firstName": "John",
        "lastName": "Doe",
        "dateOfBirth": "1985-03-15",
        "ssn": "123-45-6789",
        "phone": "212-908-3147",
        "email": "john.doe@gmail.com",
        "mailingAddress": {
            "street": "123 Main St",
            "city": "Sacramento",
            "state": "CA",
            "zipCode": "95814",
            "country": "US",
        },
        "employmentStatus": "employed",
        "occupation": "Software Engineer",
        "employer": "Tech Corp",
    },
    "financialProfile": {
        "annualIncome": 95000,
        "incomeSource": ["employment"],
        "assets": 150000,
        "liabilities": 35000,
        "bankingRelationships": [
            {"bankName": "Chase Bank", "accountTypes": ["Checking", "Savings"], "yearsWithBank": 7}
        ],
        "accountActivities": [{"activity": "Direct Deposit", "frequency": "Monthly", "amount": 7916}],
    },
    "kycVerification": {
        "status": "passed",
        "confidence": 0.95,
        "results": {
            "identity": {"passed": True, "confidence": 0.95},
            "address": {"passed": True, "confidence": 0.91},
            "phone": {"passed": True, "confidence": 0.89},
            "email": {"passed": True, "confidence": 0.93},
            "ofac": {"passed": True, "matches": []},
        },
    },
    "documents": [
        {
            "type": "drivers_license",
            "verificationStatus": "verified",
            "verificationDetails": {"provider": "Mock Provider", "confidence": 0.95},
        }
    ],
    "additionalSigners": [],
    "accountType": "consumer",
}

HIGH_RISK_APPLICATION: dict = {
    "personalInfo": {
        "firstName": "Victor",
        "lastName": "Testov",
        "dateOfBirth": "2007-03-01",
        "ssn": "000-00-0000",
        "phone": "555-123-4567",
        "email": "victor@tempmail.com",
        "mailingAddress": {
            "street": "123 Main St",
            "city": "Miami",
            "state": "FL",
            "zipCode": "33101",
            "country": "US",
        },
        "employmentStatus": "self-employed",
    },
    "businessProfile": {
        "businessName": "Cash Services LLC",
        "ein": "12-3456789",
        "entityType": "LLC",
        "industryType": "Money Services",
        "dateEstablished": "2025-06-01",
        "businessAddress": {
            "street": "456 Business St",
            "city": "Miami",
            "state": "FL",
            "zipCode": "33101",
            "country": "US",
        },
        "isCashIntensive": True,
        "monthlyTransactionVolume": 1000000,
        "monthlyTransactionCount": 5000,
        "expectedBalance": 25000,
    },
    "financialProfile": {
        "annualIncome": 30000,
        "incomeSource": ["self-employment"],
        "assets": 5000,
        "liabilities": 75000,
        "bankingRelationships": [
            {"bankName": "Local Credit Union", "accountTypes": ["Checking"], "yearsWithBank": 0.5}
        ],
        "accountActivities": [],
    },
    "kycVerification": {
        "status": "failed",
        "confidence": 0.4,
        "results": {
            "identity": {"passed": False, "confidence": 0.4},
            "ofac": {"passed": False, "matches": [{"name": "Victor Testov", "list": "SDN"}]},
        },
    },
    "documents": [],
    "additionalSigners": [],
    "accountType": "commercial",
}


def fixed_clock() -> datetime:
    return NOW


def counting_ids(prefix: str = "ra"):
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


@pytest.fixture
def low_risk_application() -> dict:
    return copy.deepcopy(LOW_RISK_APPLICATION)


@pytest.fixture
def high_risk_application() -> dict:
    return copy.deepcopy(HIGH_RISK_APPLICATION)


@pytest.fixture
def engine() -> RiskAssessmentEngine:
    return RiskAssessmentEngine(clock=fixed_clock, id_factory=counting_ids())
