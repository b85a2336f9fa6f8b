"""
FastAPI dependency providers.

The app factory attaches the store, notifier, payment provider and
settings to ``app.state``; these providers read them back per request
and build the service objects handlers work with.
"""

from fastapi import Depends, Request

from skybook_api.app.core.config import Settings
from skybook_api.app.core.store import EntityStore
from skybook_api.app.services.booking_service import BookingService
from skybook_api.app.services.catalog_service import CatalogService
from skybook_api.app.services.notification_service import NotificationService, Notifier
from skybook_api.app.services.payment_service import PaymentProvider, PaymentService
from skybook_api.app.services.statistics_service import StatisticsService
from skybook_api.app.services.user_service import UserService
from skybook_api.app.services.verification_service import VerificationService


def get_store(request: Request) -> EntityStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier


def get_payment_provider(request: Request) -> PaymentProvider:
    return request.app.state.payment_provider


def get_user_service(store: EntityStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_catalog_service(store: EntityStore = Depends(get_store)) -> CatalogService:
    return CatalogService(store)


def get_booking_service(
    store: EntityStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> BookingService:
    return BookingService(store, advance_rate=settings.advance_rate)


def get_notification_service(
    store: EntityStore = Depends(get_store),
    notifier: Notifier = Depends(get_notifier),
    settings: Settings = Depends(get_settings),
) -> NotificationService:
    return NotificationService(store, notifier, settings)


def get_verification_service(
    request: Request,
    store: EntityStore = Depends(get_store),
    notifications: NotificationService = Depends(get_notification_service),
    settings: Settings = Depends(get_settings),
) -> VerificationService:
    return VerificationService(
        store,
        notifications,
        ttl_minutes=settings.otp_ttl_minutes,
        clock=request.app.state.clock,
    )


def get_statistics_service(
    store: EntityStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> StatisticsService:
    return StatisticsService(store, growth=settings.stats_growth)


def get_payment_service(
    provider: PaymentProvider = Depends(get_payment_provider),
    settings: Settings = Depends(get_settings),
) -> PaymentService:
    return PaymentService(provider, default_currency=settings.currency)
