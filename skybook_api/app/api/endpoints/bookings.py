"""
Booking endpoints.

These routes handle creating bookings, listing a customer's bookings,
updating a booking after payment and computing the cost breakdown
shown before checkout.  They rely on ``BookingService`` for the
cross‑entity checks (verified user, existing service).
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from skybook_api.app.api.deps import get_booking_service
from skybook_api.app.core.errors import NotFoundError, PreconditionFailed, ValidationError
from skybook_api.app.schemas.booking import (
    Booking,
    BookingCreate,
    BookingUpdate,
    BookingWithService,
    Quote,
    QuoteRequest,
)
from skybook_api.app.services.booking_service import BookingService

router = APIRouter()


@router.post("", response_model=Booking, status_code=status.HTTP_201_CREATED)
async def create_booking(
    booking: BookingCreate,
    bookings: BookingService = Depends(get_booking_service),
) -> Booking:
    """Create a booking for a verified user.

    Returns 400 if the user does not exist or has not verified their
    email, or if the service does not exist.
    """
    try:
        return await bookings.create_booking(booking)
    except (ValidationError, PreconditionFailed) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)


@router.post("/quote", response_model=Quote)
async def quote_booking(
    request: QuoteRequest,
    bookings: BookingService = Depends(get_booking_service),
) -> Quote:
    """Return price per hour, total, advance share and balance for a booking."""
    try:
        return await bookings.quote(request.service_id, request.duration)
    except NotFoundError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/user/{user_id}", response_model=List[BookingWithService])
async def list_user_bookings(
    user_id: int = Path(..., description="ID of the user"),
    bookings: BookingService = Depends(get_booking_service),
) -> List[BookingWithService]:
    """List a user's bookings with a summary of each booked service.

    An unknown user simply has no bookings, so the result is an empty
    list rather than 404.
    """
    return await bookings.get_user_bookings(user_id)


@router.patch("/{booking_id}", response_model=Booking)
async def update_booking(
    update: BookingUpdate,
    booking_id: int = Path(..., description="ID of the booking"),
    bookings: BookingService = Depends(get_booking_service),
) -> Booking:
    """Update status, payment state or details of a booking.

    Only the fields present in the body are changed; ``null`` clears
    ``requirements`` or ``paymentStatus``.  Returns 404 if the booking
    does not exist.
    """
    booking = await bookings.update_booking_status(booking_id, update.changes())
    if booking is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return booking
