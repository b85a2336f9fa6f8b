"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration for local development
(emails are then only logged, see ``services.notification_service``).
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "SkyBook Pro API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Host and port used by ``run.py`` when serving with uvicorn.
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "5000"))

    # Administrator credentials.  There is no session or token issuance;
    # the admin login endpoint only compares against this pair.
    admin_email: str = os.getenv("ADMIN_EMAIL", "admin@skybook.pro")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")

    # Lifetime of an email verification code.
    otp_ttl_minutes: int = int(os.getenv("OTP_TTL_MINUTES", "10"))

    # Install the default service catalog and the verified demo user
    # (id 1) into a fresh store.
    seed_demo_data: bool = os.getenv("SEED_DEMO_DATA", "true").lower() in {"1", "true", "yes"}

    # HTTP mail provider.  When ``email_api_url`` is empty the notifier
    # falls back to writing messages to the log.
    email_api_url: str = os.getenv("EMAIL_API_URL", "")
    email_api_key: str = os.getenv("EMAIL_API_KEY", "")
    email_from: str = os.getenv("EMAIL_FROM", "noreply@skybook.pro")
    email_timeout: float = float(os.getenv("EMAIL_HTTP_TIMEOUT", "10.0"))

    # Pricing.  ``advance_rate`` is the share of the total charged when a
    # customer chooses to pay an advance instead of the full amount.
    currency: str = os.getenv("CURRENCY", "INR")
    advance_rate: str = os.getenv("ADVANCE_RATE", "0.30")

    # The admin dashboard shows a growth figure; it is not computed from
    # data.
    stats_growth: str = os.getenv("STATS_GROWTH", "+24%")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
