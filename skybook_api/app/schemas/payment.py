"""
Pydantic models for payment intents and booking notifications.

Payments are simulated: creating an intent returns a client secret the
client would hand to a payment widget.  ``amount`` in the response is
expressed in minor currency units (paise for INR).
"""

from typing import Optional

from pydantic import Field

from .base import ApiModel

PAYMENT_FULL = "full"
PAYMENT_ADVANCE = "advance"


class PaymentIntentCreate(ApiModel):
    amount: float = Field(..., gt=0, examples=[90.0])
    booking_id: Optional[int] = Field(default=None, examples=[1])
    payment_type: str = Field(PAYMENT_FULL, examples=[PAYMENT_ADVANCE])
    currency: Optional[str] = Field(default=None, examples=["INR"])


class PaymentIntentRead(ApiModel):
    client_secret: str
    amount: int
    currency: str
    payment_type: str
    booking_id: Optional[int] = None


class BookingNotificationRequest(ApiModel):
    booking_id: int
    type: str = Field("confirmation", examples=["confirmation"])
    payment_type: str = Field(PAYMENT_FULL, examples=[PAYMENT_FULL])


class MessageResponse(ApiModel):
    message: str
