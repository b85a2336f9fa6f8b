"""
Business logic for payments.

No real payment gateway is integrated.  ``SimulatedPaymentProvider``
issues client secrets shaped like a gateway's payment intents
(``pi_<epoch ms>_secret_<random>``); the client then simulates the
customer completing the payment and reports back by updating the
booking.  ``PaymentService`` converts amounts to minor currency units
and maps provider failures to ``PaymentFailed``.
"""

import logging
import secrets
import string
import time
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

from skybook_api.app.core.errors import PaymentFailed
from skybook_api.app.schemas.payment import PaymentIntentCreate, PaymentIntentRead

_BASE36 = string.digits + string.ascii_lowercase


def to_minor_units(amount: float) -> int:
    """Convert a major-unit amount to minor units, rounding halves up."""
    return int((Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class PaymentProvider(Protocol):
    async def create_intent(self, amount_minor: int, currency: str) -> str:
        ...


class SimulatedPaymentProvider:
    """Stand‑in for a payment gateway; always succeeds."""

    async def create_intent(self, amount_minor: int, currency: str) -> str:
        suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
        return f"pi_{int(time.time() * 1000)}_secret_{suffix}"


class PaymentService:
    """Service for creating payment intents."""

    def __init__(self, provider: PaymentProvider, default_currency: str = "INR") -> None:
        self.provider = provider
        self.default_currency = default_currency

    async def create_payment_intent(self, data: PaymentIntentCreate) -> PaymentIntentRead:
        logger = logging.getLogger(__name__)
        currency = data.currency or self.default_currency
        amount_minor = to_minor_units(data.amount)
        try:
            client_secret = await self.provider.create_intent(amount_minor, currency)
        except PaymentFailed:
            logger.error("Payment intent for booking %s rejected by provider", data.booking_id)
            raise
        logger.info(
            "Payment intent created for booking %s: %s %s (%s)",
            data.booking_id,
            amount_minor,
            currency,
            data.payment_type,
        )
        return PaymentIntentRead(
            client_secret=client_secret,
            amount=amount_minor,
            currency=currency,
            payment_type=data.payment_type,
            booking_id=data.booking_id,
        )
