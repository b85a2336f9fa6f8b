"""
Outbound notifications (email and SMS).

The ``Notifier`` is the external collaborator that delivers messages.
``HttpEmailNotifier`` posts emails to an HTTP mail provider (the JSON
shape follows the common ``personalizations``/``content`` layout used
by SendGrid‑style APIs).  SMS delivery is simulated: the text is
written to the log.  When no provider is configured, ``LoggingNotifier``
logs both channels so local development works without credentials.

Delivery is fire‑and‑wait with no retries.  A failed email raises
``NotificationFailed``; callers decide how to surface it.
"""

import html
import logging
from decimal import Decimal
from typing import Protocol

import httpx

from skybook_api.app.core.config import Settings
from skybook_api.app.core.errors import NotFoundError, NotificationFailed
from skybook_api.app.core.store import EntityStore
from skybook_api.app.schemas.base import to_money
from skybook_api.app.schemas.payment import PAYMENT_FULL
from skybook_api.app.schemas.user import User

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    async def send_email(self, to: str, subject: str, body_html: str) -> None:
        ...

    async def send_sms(self, phone: str, text: str) -> None:
        ...


class LoggingNotifier:
    """Notifier that only writes messages to the log."""

    async def send_email(self, to: str, subject: str, body_html: str) -> None:
        logger.info("Email to %s: %s", to, subject)
        logger.debug("Email body for %s: %s", to, body_html)

    async def send_sms(self, phone: str, text: str) -> None:
        logger.info("SMS sent to %s: %s", phone, text)


class HttpEmailNotifier:
    """Deliver emails through an HTTP mail provider using ``httpx``."""

    def __init__(self, api_url: str, api_key: str, sender: str, timeout: float = 10.0) -> None:
        self.api_url = api_url
        self.api_key = api_key
        self.sender = sender
        self.timeout = timeout

    async def send_email(self, to: str, subject: str, body_html: str) -> None:
        payload = {
            "from": {"email": self.sender},
            "personalizations": [{"to": [{"email": to}], "subject": subject}],
            "content": [{"type": "text/html", "value": body_html}],
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.api_url, json=payload, headers=headers)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Email sending to %s failed: %s", to, exc)
            raise NotificationFailed("Failed to send email") from exc
        logger.info("Email sent to %s: %s", to, subject)

    async def send_sms(self, phone: str, text: str) -> None:
        # No SMS gateway is integrated; delivery is simulated.
        logger.info("SMS sent to %s: %s", phone, text)


def build_notifier(settings: Settings) -> Notifier:
    """Return the notifier configured by ``settings``."""
    if settings.email_api_url:
        return HttpEmailNotifier(
            api_url=settings.email_api_url,
            api_key=settings.email_api_key,
            sender=settings.email_from,
            timeout=settings.email_timeout,
        )
    logger.warning("EMAIL_API_URL is not set; emails will only be logged")
    return LoggingNotifier()


def render_otp_email(code: str, ttl_minutes: int) -> str:
    return f"""
      <div style="font-family: Inter, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
        <h1 style="color: #1e3a8a;">SkyBook Pro</h1>
        <h2>Verify Your Email</h2>
        <p>Your verification code is:</p>
        <div style="font-size: 32px; font-weight: bold; letter-spacing: 4px;">{html.escape(code)}</div>
        <p style="font-size: 14px;">This code will expire in {ttl_minutes} minutes.
        If you didn't request this verification, please ignore this email.</p>
      </div>
    """


class NotificationService:
    """Compose and send the messages the booking flow needs."""

    def __init__(self, store: EntityStore, notifier: Notifier, settings: Settings) -> None:
        self.store = store
        self.notifier = notifier
        self.settings = settings

    async def send_verification_code(self, user: User, code: str) -> None:
        await self.notifier.send_email(
            user.email,
            "SkyBook Pro - Email Verification",
            render_otp_email(code, self.settings.otp_ttl_minutes),
        )

    async def send_booking_notification(self, booking_id: int, kind: str, payment_type: str) -> None:
        """Email and text the customer about a booking.

        ``kind`` is ``confirmation`` for a freshly paid booking; any
        other value produces a generic update message.  The SMS quotes
        the amount received: the full total, or the advance share when
        ``payment_type`` is ``advance``.
        """
        booking = self.store.bookings.get(booking_id)
        if booking is None:
            raise NotFoundError("Booking not found")
        user = self.store.users.get(booking.user_id)
        service = self.store.services.get(booking.service_id)
        if user is None or service is None:
            raise NotFoundError("User or service not found")

        confirmed = kind == "confirmation"
        full_payment = payment_type == PAYMENT_FULL
        paid = booking.total_cost if full_payment else to_money(booking.total_cost * Decimal(self.settings.advance_rate))
        advance_percent = int(Decimal(self.settings.advance_rate) * 100)

        subject = "Booking Confirmed - SkyBook Pro" if confirmed else "Booking Update - SkyBook Pro"
        payment_line = "Full payment completed" if full_payment else f"{advance_percent}% advance paid"
        body = f"""
          <p>Dear {html.escape(user.full_name)},</p>
          <p>Your drone service booking has been {"confirmed" if confirmed else "updated"}.</p>
          <ul>
            <li>Service: {html.escape(service.name)}</li>
            <li>Date &amp; Time: {html.escape(booking.date)} at {html.escape(booking.time)}</li>
            <li>Duration: {booking.duration} hour(s)</li>
            <li>Location: {html.escape(booking.location)}</li>
            <li>Total Cost: ₹{booking.total_cost}</li>
            <li>Payment: {payment_line}</li>
          </ul>
          <p>Thank you for choosing SkyBook Pro!</p>
        """
        await self.notifier.send_email(user.email, subject, body)

        if user.phone:
            text = (
                f"SkyBook Pro: Your {service.name} booking for {booking.date} at {booking.time} "
                f"is {'confirmed' if confirmed else 'updated'}. Payment: ₹{paid} received."
            )
            await self.notifier.send_sms(user.phone, text)
