"""
Public catalog endpoints.

Listing returns active services only; lookup by id returns any stored
service, active or not.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from skybook_api.app.api.deps import get_catalog_service
from skybook_api.app.schemas.service import Service
from skybook_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("", response_model=List[Service])
async def list_services(catalog: CatalogService = Depends(get_catalog_service)) -> List[Service]:
    return await catalog.list_active_services()


@router.get("/{service_id}", response_model=Service)
async def get_service(
    service_id: int = Path(..., description="ID of the service"),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Service:
    service = await catalog.get_service(service_id)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return service
