"""
Authentication request/response schemas.

Fields are optional on purpose: presence is checked by the auth service so
that a missing field gets the same 400 answer as an empty one.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CredentialsRequest(BaseModel):
    """Username/password body used by both register and login."""

    username: Optional[str] = Field(default=None, description="Username")
    password: Optional[str] = Field(default=None, description="User password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "password": "securepassword123",
            }
        }
    )


class RegisterRequest(CredentialsRequest):
    """User registration request schema."""


class LoginRequest(CredentialsRequest):
    """User login request schema."""


class TokenResponse(BaseModel):
    """JWT token response schema."""

    response: str = Field(description="Human readable outcome")
    token: str = Field(description="JWT access token")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "response": "User logged in successfully.",
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            }
        }
    )
