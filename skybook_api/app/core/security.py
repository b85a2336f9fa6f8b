"""
Security helpers: admin credential check and one‑time code generation.

Admin authentication is a comparison against the credential pair held
in the application settings.  No token or session is issued on
success, so the admin routes themselves are not guarded.  Comparisons
use ``hmac.compare_digest`` to avoid leaking timing information.
"""

import hmac
import secrets

from .config import Settings

OTP_LOW = 100000
OTP_HIGH = 999999


def generate_otp() -> str:
    """Return a six‑digit numeric code drawn uniformly from 100000–999999."""
    return str(OTP_LOW + secrets.randbelow(OTP_HIGH - OTP_LOW + 1))


def verify_admin_credentials(email: str, password: str, settings: Settings) -> bool:
    """Check ``email``/``password`` against the configured admin pair."""
    email_ok = hmac.compare_digest(email.encode("utf-8"), settings.admin_email.encode("utf-8"))
    password_ok = hmac.compare_digest(password.encode("utf-8"), settings.admin_password.encode("utf-8"))
    return email_ok and password_ok
