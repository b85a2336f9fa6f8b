"""
Domain exceptions.

Services raise these exceptions; endpoints translate them into HTTP
responses.  Every class carries the status code it maps to so that
endpoints can forward ``exc.status_code`` unchanged.
"""

from typing import Any, Dict, List, Optional


class SkyBookError(Exception):
    """Base class for all errors raised by the service layer."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(SkyBookError):
    """Malformed or missing input.  ``errors`` lists the offending fields."""

    status_code = 400
    default_message = "Invalid input data"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class DuplicateEmailError(ValidationError):
    default_message = "User already exists with this email"


class NotFoundError(SkyBookError):
    status_code = 404
    default_message = "Not found"


class PreconditionFailed(SkyBookError):
    """Input is well formed but a referenced entity is not eligible."""

    status_code = 400
    default_message = "Precondition failed"


class InvalidCode(SkyBookError):
    status_code = 400
    default_message = "Invalid OTP"


class CodeExpired(SkyBookError):
    status_code = 400
    default_message = "OTP has expired"


class AuthError(SkyBookError):
    status_code = 401
    default_message = "Invalid admin credentials"


class NotificationFailed(SkyBookError):
    status_code = 500
    default_message = "Failed to send notification"


class PaymentFailed(SkyBookError):
    status_code = 500
    default_message = "Payment initialization failed"
