"""Middleware for authentication and other cross-cutting concerns."""

from .auth import JWTBearer, bearer_token

__all__ = ["JWTBearer", "bearer_token"]
