"""
Pydantic models for user data.

``User`` is the stored record, including the pending verification code
and its expiry.  The code never leaves the service layer: API
responses use ``UserRead`` or ``UserSummary`` instead.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import ApiModel


class UserBase(ApiModel):
    full_name: str = Field(..., min_length=1, examples=["Asha Rao"])
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$", examples=["asha@example.com"])
    phone: str = Field(..., min_length=1, examples=["+919812345678"])


class UserCreate(UserBase):
    """Schema for registering a user."""
    pass


class User(UserBase):
    """A stored user record."""

    id: int
    is_verified: bool = False
    otp: Optional[str] = None
    otp_expires: Optional[datetime] = None
    created_at: datetime


class UserRead(ApiModel):
    """Public profile of a user."""

    id: int
    full_name: str
    email: str
    phone: str
    is_verified: bool


class UserSummary(ApiModel):
    """Identity returned after a successful verification."""

    id: int
    full_name: str
    email: str


class RegisterResponse(ApiModel):
    message: str
    user_id: int


class VerifyOtpRequest(ApiModel):
    user_id: int
    otp: str = Field(..., min_length=1)


class VerifyOtpResponse(ApiModel):
    message: str
    user: UserSummary


class ResendOtpRequest(ApiModel):
    user_id: int
