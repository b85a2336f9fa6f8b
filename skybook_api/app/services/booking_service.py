"""
Business logic for bookings.

The ``BookingService`` admits a booking only when its user exists and
has verified their email and its service exists (inactive services can
still be booked by id).  Read paths join each booking to the current
user and service records; a reference to a deleted entity is rendered
as ``None`` rather than failing the whole listing.

Pricing is client‑authoritative: ``total_cost`` is stored exactly as
submitted.  A mismatch with price per hour × duration is logged but
not rejected.
"""

import logging
from decimal import Decimal
from typing import Any, List, Mapping, Optional, Union

import pydantic

from skybook_api.app.core.errors import NotFoundError, PreconditionFailed, ValidationError
from skybook_api.app.core.store import EntityStore
from skybook_api.app.schemas.base import to_money
from skybook_api.app.schemas.booking import (
    AdminBooking,
    BookedService,
    Booking,
    BookingCreate,
    BookingServiceName,
    BookingUser,
    BookingWithService,
    Quote,
)


class BookingService:
    """Service for creating, listing and updating bookings."""

    def __init__(self, store: EntityStore, advance_rate: str = "0.30") -> None:
        self.store = store
        self.advance_rate = Decimal(advance_rate)

    async def create_booking(self, data: Union[BookingCreate, Mapping[str, Any]]) -> Booking:
        """Validate and store a booking.

        ``data`` may be a raw mapping, in which case it is validated
        against ``BookingCreate`` first and every violated field is
        reported in ``ValidationError.errors``.
        """
        logger = logging.getLogger(__name__)
        if not isinstance(data, BookingCreate):
            try:
                data = BookingCreate.model_validate(data)
            except pydantic.ValidationError as exc:
                raise ValidationError(
                    "Invalid booking data",
                    errors=exc.errors(include_url=False, include_context=False),
                ) from exc

        user = self.store.users.get(data.user_id)
        if user is None or not user.is_verified:
            raise PreconditionFailed("User not found or not verified")
        service = self.store.services.get(data.service_id)
        if service is None:
            raise PreconditionFailed("Service not found")

        expected = to_money(service.price_per_hour * data.duration)
        if data.total_cost != expected:
            logger.warning(
                "Booking for user %s: client total %s differs from %s x %sh = %s",
                user.id,
                data.total_cost,
                service.price_per_hour,
                data.duration,
                expected,
            )

        booking = self.store.bookings.create(data.model_dump(exclude_none=True))
        logger.info(
            "Booking %s created: user %s, service %s, %s %s, %sh",
            booking.id,
            booking.user_id,
            booking.service_id,
            booking.date,
            booking.time,
            booking.duration,
        )
        return booking

    async def get_booking(self, booking_id: int) -> Optional[Booking]:
        return self.store.bookings.get(booking_id)

    async def get_user_bookings(self, user_id: int) -> List[BookingWithService]:
        """Return the user's bookings, each with a summary of its service."""
        enriched: List[BookingWithService] = []
        for booking in self.store.list_user_bookings(user_id):
            service = self.store.services.get(booking.service_id)
            summary = None
            if service is not None:
                summary = BookedService(
                    name=service.name,
                    description=service.description,
                    icon=service.icon,
                    color=service.color,
                )
            enriched.append(BookingWithService(**booking.model_dump(), service=summary))
        return enriched

    async def get_all_bookings_enriched(self) -> List[AdminBooking]:
        """Return every booking with its customer and service name (admin view)."""
        enriched: List[AdminBooking] = []
        for booking in self.store.bookings.list():
            user = self.store.users.get(booking.user_id)
            service = self.store.services.get(booking.service_id)
            enriched.append(
                AdminBooking(
                    **booking.model_dump(),
                    user=BookingUser(full_name=user.full_name, email=user.email) if user else None,
                    service=BookingServiceName(name=service.name) if service else None,
                )
            )
        return enriched

    async def update_booking_status(self, booking_id: int, fields: Mapping[str, Any]) -> Optional[Booking]:
        """Apply a partial update; ``None`` if the booking does not exist."""
        booking = self.store.bookings.update(booking_id, fields)
        if booking is not None:
            logging.getLogger(__name__).info("Booking %s updated: %s", booking_id, dict(fields))
        return booking

    async def quote(self, service_id: int, duration: int) -> Quote:
        """Compute the cost breakdown shown on the bill before payment."""
        service = self.store.services.get(service_id)
        if service is None:
            raise NotFoundError("Service not found")
        total = to_money(service.price_per_hour * duration)
        advance = to_money(total * self.advance_rate)
        return Quote(
            service_id=service.id,
            price_per_hour=service.price_per_hour,
            duration=duration,
            total_cost=total,
            advance_amount=advance,
            balance_due=total - advance,
        )
