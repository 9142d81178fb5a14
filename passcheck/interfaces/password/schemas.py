"""
Pydantic schemas for the password check API contract.

The check endpoint reads its body raw so the request adapter can
apply its own 400/500 rules; the request schema documents the
expected payload in OpenAPI only.
No business logic belongs here.
"""

from pydantic import BaseModel, ConfigDict, Field


class PasswordCheckRequest(BaseModel):
    """Request schema for the password check endpoint.

    Attributes:
        password: The candidate password.
    """

    password: str = Field(..., description="Password to check")


class PasswordCheckResponse(BaseModel):
    """Response schema for a successful password check."""

    model_config = ConfigDict(populate_by_name=True)

    is_valid_password: bool = Field(..., alias="isValidPassword")


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint.

    Attributes:
        status: "ok" when ready, "degraded" when the password list is unavailable.
        version: Service version.
        common_passwords: Number of entries in the loaded common password list.
    """

    status: str
    version: str
    common_passwords: int = 0


class ErrorResponse(BaseModel):
    """Standard error response returned by all error paths."""

    error: str
    detail: str | None = None
