"""
Admin endpoints: login, catalog management, bookings overview and
dashboard statistics.

Admin login only checks the configured credential pair; it does not
issue a token, and the other admin routes are not guarded.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from skybook_api.app.api.deps import (
    get_booking_service,
    get_catalog_service,
    get_settings,
    get_statistics_service,
)
from skybook_api.app.core.config import Settings
from skybook_api.app.core.errors import AuthError
from skybook_api.app.core.security import verify_admin_credentials
from skybook_api.app.schemas.admin import AdminLogin, AdminLoginResponse, AdminRead, StatsRead
from skybook_api.app.schemas.booking import AdminBooking
from skybook_api.app.schemas.payment import MessageResponse
from skybook_api.app.schemas.service import Service, ServiceCreate, ServiceUpdate
from skybook_api.app.services.booking_service import BookingService
from skybook_api.app.services.catalog_service import CatalogService
from skybook_api.app.services.statistics_service import StatisticsService

router = APIRouter()

ADMIN_ID = 999


@router.post("/login", response_model=AdminLoginResponse)
async def admin_login(
    credentials: AdminLogin,
    settings: Settings = Depends(get_settings),
) -> AdminLoginResponse:
    if not verify_admin_credentials(credentials.email, credentials.password, settings):
        error = AuthError()
        raise HTTPException(status_code=error.status_code, detail=error.message)
    return AdminLoginResponse(
        message="Admin login successful",
        admin=AdminRead(id=ADMIN_ID, name="Admin", email=settings.admin_email, role="admin"),
    )


@router.post("/services", response_model=Service, status_code=status.HTTP_201_CREATED)
async def create_service(
    service: ServiceCreate,
    catalog: CatalogService = Depends(get_catalog_service),
) -> Service:
    return await catalog.create_service(service)


@router.put("/services/{service_id}", response_model=Service)
async def update_service(
    update: ServiceUpdate,
    service_id: int = Path(..., description="ID of the service"),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Service:
    """Apply a partial update to a service.  Returns 404 if it does not exist."""
    # Every service field is required, so an explicit null leaves it unchanged.
    fields = update.model_dump(exclude_unset=True, exclude_none=True)
    service = await catalog.update_service(service_id, fields)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return service


@router.delete("/services/{service_id}", response_model=MessageResponse)
async def delete_service(
    service_id: int = Path(..., description="ID of the service"),
    catalog: CatalogService = Depends(get_catalog_service),
) -> MessageResponse:
    """Delete a service.

    Existing bookings of the service are kept; their nested service
    summary becomes ``null``.
    """
    if not await catalog.delete_service(service_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return MessageResponse(message="Service deleted successfully")


@router.get("/bookings", response_model=List[AdminBooking])
async def list_all_bookings(bookings: BookingService = Depends(get_booking_service)) -> List[AdminBooking]:
    return await bookings.get_all_bookings_enriched()


@router.get("/stats", response_model=StatsRead)
async def get_stats(statistics: StatisticsService = Depends(get_statistics_service)) -> StatsRead:
    return await statistics.compute_stats()
