"""
Payment and notification endpoints used by the checkout flow.

The client creates the booking, asks for a payment intent, simulates
the customer paying, updates the booking and finally asks the server
to notify the customer.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from skybook_api.app.api.deps import get_notification_service, get_payment_service
from skybook_api.app.core.errors import NotFoundError, NotificationFailed, PaymentFailed
from skybook_api.app.schemas.payment import (
    BookingNotificationRequest,
    MessageResponse,
    PaymentIntentCreate,
    PaymentIntentRead,
)
from skybook_api.app.services.notification_service import NotificationService
from skybook_api.app.services.payment_service import PaymentService

router = APIRouter()


@router.post("/create-payment-intent", response_model=PaymentIntentRead)
async def create_payment_intent(
    data: PaymentIntentCreate,
    payments: PaymentService = Depends(get_payment_service),
) -> PaymentIntentRead:
    """Create a simulated payment intent.

    ``amount`` is given in major units (rupees) and returned in minor
    units (paise).
    """
    try:
        return await payments.create_payment_intent(data)
    except PaymentFailed as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/send-booking-notification", response_model=MessageResponse)
async def send_booking_notification(
    data: BookingNotificationRequest,
    notifications: NotificationService = Depends(get_notification_service),
) -> MessageResponse:
    """Email and text the customer about their booking."""
    try:
        await notifications.send_booking_notification(data.booking_id, data.type, data.payment_type)
    except NotFoundError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except NotificationFailed:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to send notifications")
    return MessageResponse(message="Notifications sent successfully")
