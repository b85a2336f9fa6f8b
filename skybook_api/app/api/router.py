"""
Top‑level API router.

Aggregates the domain routers under a unified ``/api`` prefix (applied
in ``main.create_app``).  When new domains are introduced, include
their routers here.
"""

from fastapi import APIRouter

from .endpoints import admin, bookings, payments, services, users

router = APIRouter()

# Registration and verification live at the root of /api
# (/api/register, /api/verify-otp, ...), as do the checkout helpers
# (/api/create-payment-intent, /api/send-booking-notification).
router.include_router(users.router, tags=["users"])
router.include_router(services.router, prefix="/services", tags=["services"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
router.include_router(payments.router, tags=["payments"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
