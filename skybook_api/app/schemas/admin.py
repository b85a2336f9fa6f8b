"""
Pydantic models for the admin surface: login and dashboard stats.
"""

from pydantic import Field

from .base import ApiModel


class AdminLogin(ApiModel):
    email: str = Field(..., examples=["admin@skybook.pro"])
    password: str


class AdminRead(ApiModel):
    id: int
    name: str
    email: str
    role: str


class AdminLoginResponse(ApiModel):
    message: str
    admin: AdminRead


class StatsRead(ApiModel):
    total_users: int
    total_bookings: int
    revenue: str = Field(..., examples=["1250.00"])
    growth: str = Field(..., examples=["+24%"])
