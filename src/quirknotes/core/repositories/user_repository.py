"""User repository for database operations."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import DuplicateUsernameError, StoreUnavailableError
from ..models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Credential store: username / password hash pairs."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(self, username: str, password_hash: str) -> User:
        """Create new user.

        Uniqueness is left to the database constraint so two concurrent
        inserts for the same username cannot both succeed.
        """
        user = User(username=username, password_hash=password_hash)
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            # only a row that now holds this username makes it a duplicate
            if await self.get_by_username(username) is not None:
                raise DuplicateUsernameError(username) from exc
            logger.error(f"Failed to create user: {exc}")
            raise StoreUnavailableError() from exc
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"Failed to create user: {exc}")
            raise StoreUnavailableError() from exc

        await self.session.refresh(user)
        return user

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        stmt = select(User).where(User.username == username)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error(f"Failed to look up user: {exc}")
            raise StoreUnavailableError() from exc
        return result.scalar_one_or_none()

    async def is_username_taken(self, username: str) -> bool:
        """Check if username exists."""
        user = await self.get_by_username(username)
        return user is not None
