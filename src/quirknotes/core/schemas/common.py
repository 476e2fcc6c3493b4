"""Common schemas shared by several endpoints."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    response: str = Field(description="Human readable outcome")


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    error: str = Field(description="Error message")


class HealthResponse(BaseModel):
    status: str = Field(default="ok")
