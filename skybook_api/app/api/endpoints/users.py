"""
User endpoints: registration and email verification.

Registration creates an unverified user and emails a six‑digit code.
The client then submits the code to ``/verify-otp``; ``/resend-otp``
replaces a pending code with a fresh one.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from skybook_api.app.api.deps import get_user_service, get_verification_service
from skybook_api.app.core.errors import (
    CodeExpired,
    DuplicateEmailError,
    InvalidCode,
    NotFoundError,
    NotificationFailed,
)
from skybook_api.app.schemas.payment import MessageResponse
from skybook_api.app.schemas.user import (
    RegisterResponse,
    ResendOtpRequest,
    UserCreate,
    UserRead,
    UserSummary,
    VerifyOtpRequest,
    VerifyOtpResponse,
)
from skybook_api.app.services.user_service import UserService
from skybook_api.app.services.verification_service import VerificationService

router = APIRouter()


@router.post("/register", response_model=RegisterResponse)
async def register_user(
    data: UserCreate,
    users: UserService = Depends(get_user_service),
    verification: VerificationService = Depends(get_verification_service),
) -> RegisterResponse:
    """Register a new user and email them a verification code.

    Returns 400 if the email is already registered.  If the email cannot
    be delivered the user still exists with a pending code; the client
    can call ``/resend-otp`` later.
    """
    try:
        user = await users.create_user(data)
    except DuplicateEmailError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    try:
        await verification.issue_code(user.id)
    except NotificationFailed:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send verification email",
        )
    return RegisterResponse(
        message="Registration successful. Please check your email for verification code.",
        user_id=user.id,
    )


@router.post("/verify-otp", response_model=VerifyOtpResponse)
async def verify_otp(
    data: VerifyOtpRequest,
    verification: VerificationService = Depends(get_verification_service),
) -> VerifyOtpResponse:
    """Verify a user's email with the code they received."""
    try:
        user = await verification.verify_code(data.user_id, data.otp)
    except (NotFoundError, InvalidCode, CodeExpired) as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return VerifyOtpResponse(
        message="Email verified successfully",
        user=UserSummary(id=user.id, full_name=user.full_name, email=user.email),
    )


@router.post("/resend-otp", response_model=MessageResponse)
async def resend_otp(
    data: ResendOtpRequest,
    verification: VerificationService = Depends(get_verification_service),
) -> MessageResponse:
    """Issue a new code, replacing any pending one."""
    try:
        await verification.issue_code(data.user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except NotificationFailed:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send verification email",
        )
    return MessageResponse(message="OTP sent successfully")


@router.get("/user/{user_id}", response_model=UserRead)
async def get_user(
    user_id: int = Path(..., description="ID of the user"),
    users: UserService = Depends(get_user_service),
) -> UserRead:
    user = await users.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserRead.model_validate(user)
