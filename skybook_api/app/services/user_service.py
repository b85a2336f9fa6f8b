"""
Business logic for users.

Registration creates an unverified user; the verification code is
issued separately by ``VerificationService``.  Emails are unique
across all users.
"""

import logging
from typing import Optional

from skybook_api.app.core.errors import DuplicateEmailError
from skybook_api.app.core.store import EntityStore
from skybook_api.app.schemas.user import User, UserCreate


class UserService:
    """Service for registering and looking up users."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    async def create_user(self, data: UserCreate) -> User:
        """Create a new, unverified user.

        Raises ``DuplicateEmailError`` if another user already has the
        same email address.
        """
        logger = logging.getLogger(__name__)
        if self.store.get_user_by_email(data.email) is not None:
            logger.info("Registration rejected, email %s already in use", data.email)
            raise DuplicateEmailError()
        user = self.store.users.create(data.model_dump())
        logger.info("Registered user %s (%s)", user.id, user.email)
        return user

    async def get_user(self, user_id: int) -> Optional[User]:
        return self.store.users.get(user_id)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return self.store.get_user_by_email(email)
