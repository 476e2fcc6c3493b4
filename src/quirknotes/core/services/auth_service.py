"""Authentication service implementation."""

import asyncio
import logging
from typing import Optional

from ...security import PasswordHasher, TokenIssuer
from ..exceptions import (
    AuthenticationFailedError,
    DuplicateUsernameError,
    InvalidInputError,
    UsernameTakenError,
)
from ..repositories.user_repository import UserRepository
from .interfaces import IAuthService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, users: UserRepository, hasher: PasswordHasher, tokens: TokenIssuer):
        self.users = users
        self.hasher = hasher
        self.tokens = tokens

    async def register(self, username: Optional[str], password: Optional[str]) -> str:
        """Register new user and return a token for it."""
        if not username or not password:
            raise InvalidInputError("Username and password both needed to register.")

        # fast path, the unique constraint below is what actually guarantees it
        if await self.users.is_username_taken(username):
            raise UsernameTakenError()

        # bcrypt blocks, so it runs in a worker thread
        password_hash = await asyncio.to_thread(self.hasher.hash, password)

        try:
            await self.users.create_user(username, password_hash)
        except DuplicateUsernameError as exc:
            logger.info(f"Concurrent registration lost for username {username}")
            raise UsernameTakenError() from exc

        logger.info(f"Registered user {username}")
        return self.tokens.issue(username)

    async def login(self, username: Optional[str], password: Optional[str]) -> str:
        """Check credentials and return a token."""
        if not username or not password:
            raise InvalidInputError("Username and password both needed to login.")

        user = await self.users.get_by_username(username)

        # unknown user and wrong password must look the same to the caller
        if not user or not await asyncio.to_thread(
            self.hasher.verify, password, user.password_hash
        ):
            logger.warning(f"Failed login attempt for username {username}")
            raise AuthenticationFailedError()

        logger.info(f"User {username} logged in")
        return self.tokens.issue(username)
