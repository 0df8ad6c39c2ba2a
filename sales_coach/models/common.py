"""
Common response models.

Error payload schema shared by every endpoint.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Stable error label or validation message")
    message: str | None = Field(default=None, description="Implementation-detail message")
    stack: str | None = Field(default=None, description="Stack trace (verbose diagnostics only)")


class HealthResponse(BaseModel):
    """Liveness probe payload."""

    status: str
    message: str
