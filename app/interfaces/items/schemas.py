"""
Pydantic schemas for items API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateItemRequest(BaseModel):
    """Request body for creating an item.

    Attributes:
        id: Caller-supplied identifier of the new item.
        first_name: Value stored for the item (``firstName`` on the wire).
        last_name: Accepted for compatibility, not stored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int = Field(..., description="Identifier of the item")
    first_name: str = Field(
        ..., alias="firstName", description="Value stored for the item"
    )
    last_name: str | None = Field(default=None, alias="lastName")


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorPayload(BaseModel):
    """Error payload returned by the centralized error handlers."""

    timestamp: datetime
    status: int
    error: str
    message: str
    errors: dict[str, str] | None = None
    path: str
