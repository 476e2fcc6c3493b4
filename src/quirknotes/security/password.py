"""Password hashing utilities."""

from passlib.context import CryptContext

from ..core.exceptions import HashingError


class PasswordHasher:
    """Salted one-way password hashing with a tunable work factor."""

    def __init__(self, rounds: int = 12):
        # Use bcrypt_sha256 to avoid bcrypt's 72-byte truncation issue on long passwords
        # This pre-hashes with SHA-256 before applying bcrypt.
        self.context = CryptContext(
            schemes=["bcrypt_sha256"],
            deprecated="auto",
            bcrypt_sha256__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """Hash a password. Every call uses a fresh random salt."""
        try:
            return self.context.hash(password)
        except (ValueError, TypeError) as exc:
            raise HashingError() from exc

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        try:
            return self.context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            # unknown or corrupted hash format
            return False
