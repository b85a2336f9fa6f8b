"""
Email verification with one‑time codes.

A user moves from unverified to pending when a code is issued, and
from pending to verified when the matching code is submitted before it
expires.  Issuing again (resend) replaces any pending code.  Every
state change is a single store update, so the verified flag and the
code fields never disagree.

There is no rate limiting on issuance.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from skybook_api.app.core.errors import CodeExpired, InvalidCode, NotFoundError
from skybook_api.app.core.security import generate_otp
from skybook_api.app.core.store import EntityStore
from skybook_api.app.schemas.user import User
from skybook_api.app.services.notification_service import NotificationService


class VerificationService:
    """Issue and check email verification codes."""

    def __init__(
        self,
        store: EntityStore,
        notifications: NotificationService,
        ttl_minutes: int = 10,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.store = store
        self.notifications = notifications
        self.ttl = timedelta(minutes=ttl_minutes)
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    async def issue_code(self, user_id: int) -> str:
        """Generate, store and deliver a fresh code for ``user_id``.

        The code is persisted before delivery.  If delivery fails,
        ``NotificationFailed`` propagates and the stored code is kept,
        so a later resend or a code delivered late still works.
        """
        logger = logging.getLogger(__name__)
        if self.store.users.get(user_id) is None:
            raise NotFoundError("User not found")
        code = generate_otp()
        expires = self.clock() + self.ttl
        user = self.store.users.update(user_id, {"otp": code, "otp_expires": expires})
        logger.info("Verification code issued for user %s, expires %s", user_id, expires.isoformat())
        await self.notifications.send_verification_code(user, code)
        return code

    async def verify_code(self, user_id: int, code: str) -> User:
        """Check ``code`` and mark the user verified on success."""
        logger = logging.getLogger(__name__)
        user = self.store.users.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        if user.otp is None or user.otp != code:
            logger.info("Invalid verification code for user %s", user_id)
            raise InvalidCode()
        if user.otp_expires is not None and self.clock() > user.otp_expires:
            logger.info("Expired verification code for user %s", user_id)
            raise CodeExpired()
        verified = self.store.users.update(user_id, {"is_verified": True, "otp": None, "otp_expires": None})
        logger.info("User %s verified", user_id)
        return verified
