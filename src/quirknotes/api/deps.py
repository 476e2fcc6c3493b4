"""Shared FastAPI dependencies.

The store handle, hasher and token issuer are created once in the app
lifespan and kept on ``app.state``; these helpers hand them to routes.
"""

from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..security import PasswordHasher, TokenIssuer


async def get_db_session(request: Request) -> AsyncIterator[AsyncSession]:
    """Get database session for one request."""
    async with request.app.state.db.session() as session:
        yield session


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.hasher


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.tokens
