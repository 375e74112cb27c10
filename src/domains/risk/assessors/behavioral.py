"""Behavioral and pattern risk assessment."""

import re
from datetime import datetime

from ..config import BehavioralConfig, RiskEngineConfig
from ..models import RiskAssessmentInput, RiskCategory, RiskFactor, RiskImpact
from .base import RiskAssessor

_NON_DIGITS = re.compile(r"\D")


def email_domain(email: str) -> str:
    """Lower-cased domain part of an address, or empty string if there is none."""
    _, sep, domain = email.strip().lower().rpartition("@")
    return domain if sep else ""


def is_suspicious_phone(phone: str, config: BehavioralConfig) -> bool:
    digits = _NON_DIGITS.sub("", phone)
    repeated = re.compile(r"(\d)\1{%d,}" % (config.repeated_digit_run - 1))
    if repeated.search(digits):
        return True
    return any(pattern in digits for pattern in config.sequential_digit_patterns)


class BehavioralAssessor(RiskAssessor):
    """Independent heuristics on email domain, phone digits, and address consistency."""

    assessor_id = "behavioral"
    category = RiskCategory.BEHAVIORAL

    def assess(
        self,
        data: RiskAssessmentInput,
        config: RiskEngineConfig,
        as_of: datetime,
    ) -> list[RiskFactor]:
        info = data.personal_info
        if info is None:
            return []

        b = config.behavioral
        factors: list[RiskFactor] = []

        domain = email_domain(info.email) if info.email else ""
        if domain:
            factors += self._first_match(
                [
                    (
                        any(marker in domain for marker in b.disposable_email_markers),
                        self._factor(
                            "Disposable email address", 0.25, 70, RiskImpact.NEGATIVE,
                            "Using temporary or disposable email service",
                        ),
                    ),
                    (
                        domain in b.personal_email_domains,
                        self._factor(
                            "Personal email domain", 0.05, 10, RiskImpact.NEUTRAL,
                            "Using standard personal email provider",
                        ),
                    ),
                    (
                        True,
                        self._factor(
                            "Professional email domain", 0.05, 5, RiskImpact.POSITIVE,
                            "Using professional or organizational email domain",
                        ),
                    ),
                ]
            )

        if info.phone and is_suspicious_phone(info.phone, b):
            factors.append(
                self._factor(
                    "Suspicious phone pattern", 0.15, 55, RiskImpact.NEGATIVE,
                    "Phone number contains suspicious patterns",
                )
            )

        mailing, physical = info.mailing_address, info.physical_address
        if mailing is not None and physical is not None and mailing != physical:
            factors.append(
                self._factor(
                    "Different mailing and physical addresses", 0.1, 25, RiskImpact.NEUTRAL,
                    "Mailing address differs from physical address",
                )
            )

        return factors
