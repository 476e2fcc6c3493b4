"""Authentication middleware."""

from typing import Optional

from fastapi import Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer


class JWTBearer(HTTPBearer):
    """Extracts the raw bearer token from the Authorization header.

    Does not reject anything itself: a missing header or another scheme
    yields ``None`` and the note service answers 401 for it, together with
    bad signatures and expired tokens.
    """

    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> Optional[str]:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if credentials is None or credentials.scheme.lower() != "bearer":
            return None
        return credentials.credentials or None


bearer_token = JWTBearer()
