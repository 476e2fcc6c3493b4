"""
Error taxonomy for QuirkNotes.

Every error the services raise derives from ``QuirkNotesError`` and carries
the HTTP status and the public message the API layer sends back. Messages
are safe to show to clients: they never contain credentials or tokens.
"""

from http import HTTPStatus
from typing import Optional


class QuirkNotesError(Exception):
    """Base application error."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR
    detail: str = "Internal server error."

    def __init__(self, detail: Optional[str] = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class InvalidInputError(QuirkNotesError):
    """Missing or empty request fields."""

    status_code = HTTPStatus.BAD_REQUEST
    detail = "Invalid input."


class UsernameTakenError(QuirkNotesError):
    status_code = HTTPStatus.BAD_REQUEST
    detail = "Username already exists."


class AuthenticationFailedError(QuirkNotesError):
    """Bad credentials. Same message for unknown user and wrong password."""

    status_code = HTTPStatus.UNAUTHORIZED
    detail = "Authentication failed."


class UnauthorizedError(QuirkNotesError):
    """Missing, malformed or expired bearer token."""

    status_code = HTTPStatus.UNAUTHORIZED
    detail = "Unauthorized."


class InvalidIdError(QuirkNotesError):
    status_code = HTTPStatus.BAD_REQUEST
    detail = "Invalid note ID."


class NotFoundError(QuirkNotesError):
    """No note with this id owned by the caller."""

    status_code = HTTPStatus.NOT_FOUND
    detail = "Unable to find note with given ID."


class StoreUnavailableError(QuirkNotesError):
    """The database failed or could not be reached."""


class HashingError(QuirkNotesError):
    """Password hashing failed internally."""


# Lower-level errors, translated by the services


class DuplicateUsernameError(Exception):
    """Raised by the credential store when the username unique constraint fires."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"username already exists: {username}")


class InvalidTokenError(Exception):
    """Raised by the token verifier for bad signature, malformed or expired tokens."""
