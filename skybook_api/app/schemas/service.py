"""
Pydantic models for the drone service catalog.

A service is a bookable category (videography, inspection, ...) with an
hourly price.  ``icon`` and ``color`` are opaque presentation hints
passed through to clients.
"""

from typing import Optional

from pydantic import Field

from .base import ApiModel, Money


class ServiceBase(ApiModel):
    name: str = Field(..., min_length=1, examples=["Videography"])
    description: str = Field(..., examples=["Professional aerial videos"])
    price_per_hour: Money = Field(..., ge=0, examples=["150.00"])
    icon: str = Field(..., examples=["fas fa-video"])
    color: str = Field(..., examples=["from-red-500 to-pink-500"])
    is_active: bool = True


class ServiceCreate(ServiceBase):
    """Schema for creating a service (admin)."""
    pass


class ServiceUpdate(ApiModel):
    """Partial update of a service.

    Only the fields present in the request body are applied; omitted
    fields keep their stored values.
    """

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price_per_hour: Optional[Money] = Field(default=None, ge=0)
    icon: Optional[str] = None
    color: Optional[str] = None
    is_active: Optional[bool] = None


class Service(ServiceBase):
    """A stored service record."""

    id: int
