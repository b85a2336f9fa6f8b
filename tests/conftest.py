from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Tuple

import pytest
from fastapi.testclient import TestClient

from skybook_api.app.core.config import Settings
from skybook_api.app.core.errors import NotificationFailed
from skybook_api.app.core.seed import seed_demo_data
from skybook_api.app.core.store import EntityStore
from skybook_api.app.main import create_app
from skybook_api.app.services.notification_service import NotificationService


class RecordingNotifier:
    """Notifier fake that keeps every message and can be told to fail."""

    def __init__(self) -> None:
        self.emails: List[Tuple[str, str, str]] = []
        self.sms: List[Tuple[str, str]] = []
        self.fail = False

    async def send_email(self, to: str, subject: str, body_html: str) -> None:
        if self.fail:
            raise NotificationFailed("Failed to send email")
        self.emails.append((to, subject, body_html))

    async def send_sms(self, phone: str, text: str) -> None:
        self.sms.append((phone, text))


class FixedClock:
    """Callable clock whose time only moves when a test moves it."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def booking_fields(**overrides: Any) -> Dict[str, Any]:
    fields: Dict[str, Any] = {
        "user_id": 1,
        "service_id": 1,
        "location": "Marine Drive, Mumbai",
        "date": "2026-11-02",
        "time": "09:30",
        "duration": 2,
        "total_cost": Decimal("300.00"),
    }
    fields.update(overrides)
    return fields


def service_fields(**overrides: Any) -> Dict[str, Any]:
    fields: Dict[str, Any] = {
        "name": "Videography",
        "description": "Professional aerial videos",
        "price_per_hour": Decimal("150.00"),
        "icon": "fas fa-video",
        "color": "from-red-500 to-pink-500",
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def settings() -> Settings:
    return Settings(log_level="WARNING", seed_demo_data=True, email_api_url="")


@pytest.fixture
def store() -> EntityStore:
    return EntityStore()


@pytest.fixture
def seeded_store() -> EntityStore:
    store = EntityStore()
    seed_demo_data(store)
    return store


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def notifications(seeded_store, notifier, settings) -> NotificationService:
    return NotificationService(seeded_store, notifier, settings)


@pytest.fixture
def client(settings, seeded_store, notifier, clock):
    app = create_app(settings=settings, store=seeded_store, notifier=notifier, clock=clock)
    with TestClient(app) as test_client:
        yield test_client
