"""
Business logic for the service catalog.

Customers only ever see active services.  Administrators can create,
update and delete services; a deleted service disappears from booking
views (their nested ``service`` becomes ``null``) but the bookings
themselves are kept.
"""

import logging
from typing import Any, List, Mapping, Optional

from skybook_api.app.core.store import EntityStore
from skybook_api.app.schemas.service import Service, ServiceCreate


class CatalogService:
    """Service for listing and administering drone services."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    async def list_active_services(self) -> List[Service]:
        return self.store.list_active_services()

    async def get_service(self, service_id: int) -> Optional[Service]:
        return self.store.services.get(service_id)

    async def create_service(self, data: ServiceCreate) -> Service:
        service = self.store.services.create(data.model_dump())
        logging.getLogger(__name__).info("Service %s (%s) created", service.id, service.name)
        return service

    async def update_service(self, service_id: int, fields: Mapping[str, Any]) -> Optional[Service]:
        """Apply a partial update.  Returns ``None`` if the service does not exist."""
        service = self.store.services.update(service_id, fields)
        if service is not None:
            logging.getLogger(__name__).info("Service %s updated: %s", service_id, sorted(fields))
        return service

    async def delete_service(self, service_id: int) -> bool:
        deleted = self.store.services.delete(service_id)
        if deleted:
            logging.getLogger(__name__).info("Service %s deleted", service_id)
        return deleted
