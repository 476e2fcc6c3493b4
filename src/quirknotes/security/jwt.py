"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from jose import JWTError, jwt

from ..core.exceptions import InvalidTokenError

KeySource = Callable[[], str]
Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenIssuer:
    """Issues and verifies signed identity tokens.

    Tokens carry a single ``username`` claim and an ``exp`` timestamp. Nothing
    is stored server side, so verification only needs the token, the clock and
    the signing key.
    """

    def __init__(
        self,
        key_source: KeySource,
        algorithm: str = "HS256",
        lifetime: timedelta = timedelta(hours=1),
        clock: Clock = utcnow,
    ):
        self.key_source = key_source
        self.algorithm = algorithm
        self.lifetime = lifetime
        self.clock = clock

    def issue(self, username: str) -> str:
        """Create a token for ``username`` expiring ``lifetime`` from now."""
        expire = self.clock() + self.lifetime
        to_encode = {"username": username, "exp": int(expire.timestamp())}
        return jwt.encode(to_encode, self.key_source(), algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> str:
        """Return the username bound to ``token``.

        Raises InvalidTokenError when the token is missing, malformed, signed
        with another key, or expired.
        """
        if not token:
            raise InvalidTokenError("missing token")

        try:
            # expiry is checked against our own clock below
            payload = jwt.decode(
                token,
                self.key_source(),
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            raise InvalidTokenError(str(exc)) from exc

        username = payload.get("username")
        exp = payload.get("exp")
        if not isinstance(username, str) or not username:
            raise InvalidTokenError("token has no username claim")
        if not isinstance(exp, (int, float)):
            raise InvalidTokenError("token has no expiration")

        if exp <= self.clock().timestamp():
            raise InvalidTokenError("token expired")

        return username
