"""
Credential store — user records keyed by unique email.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.models import Role, User
from utils.errors import DuplicateEmail

logger = logging.getLogger(__name__)


class CredentialStore:
    """Reads and inserts ``User`` rows through one request-scoped session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email(self, email: str) -> Optional[User]:
        result = await self._session.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: Role | str = Role.UNASSIGNED,
    ) -> User:
        """
        Insert and commit a new user.

        The unique index on ``users.email`` is the authority: an insert that
        loses a race against a concurrent signup raises ``DuplicateEmail``
        and leaves nothing behind.
        """
        user = User(
            name=name,
            email=email,
            password_hash=password_hash,
            role=Role(role).value,
        )
        self._session.add(user)
        try:
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            logger.info("Signup rejected, email already stored: %s", email)
            raise DuplicateEmail() from exc
        return user

    async def list_users(self) -> List[User]:
        result = await self._session.execute(select(User).order_by(User.name))
        return list(result.scalars().all())
