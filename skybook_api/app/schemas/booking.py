"""
Pydantic models for bookings.

A booking reserves a drone service for a user at a location, date and
time for a whole number of hours.  ``total_cost`` is computed by the
client (price per hour × duration) and stored as supplied.  Read
models come in two enriched flavours: the customer view nests a
summary of the booked service, the admin view nests both the user and
the service.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field

from .base import ApiModel, Money

STATUS_CONFIRMED = "confirmed"
STATUS_ADVANCE_PAID = "advance_paid"

# Booking fields a partial update may reset to null.
NULLABLE_FIELDS = frozenset({"requirements", "payment_status"})


class BookingBase(ApiModel):
    user_id: int = Field(..., examples=[1])
    service_id: int = Field(..., examples=[1])
    location: str = Field(..., min_length=1, examples=["Marine Drive, Mumbai"])
    date: str = Field(..., min_length=1, examples=["2026-11-02"])
    time: str = Field(..., min_length=1, examples=["09:30"])
    duration: int = Field(..., ge=1, examples=[2], description="Duration in whole hours")
    total_cost: Money = Field(..., ge=0, examples=["300.00"])
    requirements: Optional[str] = Field(default=None, description="Free‑text notes for the pilot")


class BookingCreate(BookingBase):
    """Schema for creating a booking.

    ``status`` may be supplied by the checkout flow (``advance_paid`` for
    advance payments); when omitted the booking is ``confirmed``.
    """

    status: Optional[str] = Field(default=None, min_length=1)


class BookingUpdate(ApiModel):
    """Partial update of a booking.

    Used by the checkout flow after a simulated payment (``status`` and
    ``payment_status``) and by administrators to move a booking through
    its lifecycle.  Only fields present in the body are applied.
    """

    status: Optional[str] = Field(default=None, min_length=1)
    payment_status: Optional[str] = None
    location: Optional[str] = Field(default=None, min_length=1)
    date: Optional[str] = Field(default=None, min_length=1)
    time: Optional[str] = Field(default=None, min_length=1)
    duration: Optional[int] = Field(default=None, ge=1)
    total_cost: Optional[Money] = Field(default=None, ge=0)
    requirements: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        """Return the fields sent in the body.

        An explicit ``null`` clears a nullable field and is ignored for
        every other field.
        """
        fields = self.model_dump(exclude_unset=True)
        return {name: value for name, value in fields.items() if value is not None or name in NULLABLE_FIELDS}


class Booking(BookingBase):
    """A stored booking record."""

    id: int
    status: str = STATUS_CONFIRMED
    payment_status: Optional[str] = None
    created_at: datetime


class BookedService(ApiModel):
    name: str
    description: str
    icon: str
    color: str


class BookingWithService(Booking):
    """Customer view: the booking plus the service it refers to."""

    service: Optional[BookedService] = None


class BookingUser(ApiModel):
    full_name: str
    email: str


class BookingServiceName(ApiModel):
    name: str


class AdminBooking(Booking):
    """Admin view: the booking plus its customer and service name."""

    user: Optional[BookingUser] = None
    service: Optional[BookingServiceName] = None


class QuoteRequest(ApiModel):
    service_id: int
    duration: int = Field(..., ge=1)


class Quote(ApiModel):
    """Cost breakdown shown before payment."""

    service_id: int
    price_per_hour: Money
    duration: int
    total_cost: Money
    advance_amount: Money
    balance_due: Money
