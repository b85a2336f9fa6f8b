"""
In‑memory entity store.

This module replaces a database for the booking backend.  The store
holds one ``Table`` per entity kind (users, services, bookings).  Each
table assigns sequential integer ids starting at 1; ids are never
reused, even after a record is deleted.  Records are pydantic models
and are treated as immutable: ``update`` validates a shallow‑merged
copy and swaps it in, so callers must always go through the store to
change a record.

Nothing is persisted; the store lives as long as the process.  The app
factory creates one ``EntityStore`` and exposes it to request handlers
through ``app.state`` (see ``api.deps``).
"""

import threading
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from ..schemas.booking import STATUS_CONFIRMED, Booking
from ..schemas.service import Service
from ..schemas.user import User

ModelT = TypeVar("ModelT", bound=BaseModel)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Table(Generic[ModelT]):
    """Keyed collection of one entity kind.

    ``defaults`` is called on every ``create`` and its result is merged
    underneath the caller's fields, so explicit values always win.  All
    access to the record map and the id counter happens under a lock,
    which keeps id assignment atomic when handlers run in worker
    threads.
    """

    def __init__(self, model: Type[ModelT], defaults: Optional[Callable[[], Dict[str, Any]]] = None) -> None:
        self._model = model
        self._defaults = defaults or dict
        self._rows: Dict[int, ModelT] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def get(self, record_id: int) -> Optional[ModelT]:
        with self._lock:
            return self._rows.get(record_id)

    def find(self, predicate: Callable[[ModelT], bool]) -> Optional[ModelT]:
        """Return the first record (in id order) matching ``predicate``."""
        for record in self.list():
            if predicate(record):
                return record
        return None

    def list(self, predicate: Optional[Callable[[ModelT], bool]] = None) -> List[ModelT]:
        """Return a snapshot of the records, optionally filtered."""
        with self._lock:
            records = list(self._rows.values())
        if predicate is None:
            return records
        return [record for record in records if predicate(record)]

    def count(self) -> int:
        with self._lock:
            return len(self._rows)

    def create(self, fields: Mapping[str, Any]) -> ModelT:
        with self._lock:
            values = {**self._defaults(), **fields, "id": self._next_id}
            record = self._model.model_validate(values)
            self._rows[record.id] = record
            self._next_id += 1
            return record

    def update(self, record_id: int, fields: Mapping[str, Any]) -> Optional[ModelT]:
        with self._lock:
            current = self._rows.get(record_id)
            if current is None:
                return None
            values = {**current.model_dump(), **fields, "id": record_id}
            record = self._model.model_validate(values)
            self._rows[record_id] = record
            return record

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._rows.pop(record_id, None) is not None


def _user_defaults() -> Dict[str, Any]:
    return {"is_verified": False, "otp": None, "otp_expires": None, "created_at": utcnow()}


def _service_defaults() -> Dict[str, Any]:
    return {"is_active": True}


def _booking_defaults() -> Dict[str, Any]:
    return {
        "status": STATUS_CONFIRMED,
        "requirements": None,
        "payment_status": None,
        "created_at": utcnow(),
    }


class EntityStore:
    """Container for the user, service and booking tables."""

    def __init__(self) -> None:
        self.users: Table[User] = Table(User, _user_defaults)
        self.services: Table[Service] = Table(Service, _service_defaults)
        self.bookings: Table[Booking] = Table(Booking, _booking_defaults)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.users.find(lambda user: user.email == email)

    def list_active_services(self) -> List[Service]:
        return self.services.list(lambda service: service.is_active)

    def list_user_bookings(self, user_id: int) -> List[Booking]:
        return self.bookings.list(lambda booking: booking.user_id == user_id)
