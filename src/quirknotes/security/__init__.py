"""Security utilities."""

from .jwt import TokenIssuer
from .password import PasswordHasher

__all__ = [
    "PasswordHasher",
    "TokenIssuer",
]
