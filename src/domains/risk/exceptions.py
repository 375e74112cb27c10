"""Risk assessment service errors.

Each error subclasses the built-in the API's global exception handler maps
to an HTTP status: ValueError -> 400, LookupError -> 404, others -> 500.
"""


class RiskAssessmentError(Exception):
    """Base class for risk assessment service errors."""


class ApplicationNotReadyError(RiskAssessmentError, ValueError):
    """The application lacks records required before assessment."""


class AssessmentAlreadyExistsError(RiskAssessmentError, ValueError):
    """A risk assessment is already on record for the application."""


class AssessmentNotFoundError(RiskAssessmentError, LookupError):
    """No risk assessment is on record for the application."""


class RiskAssessmentFailedError(RiskAssessmentError, RuntimeError):
    """The engine raised while assessing an application."""
