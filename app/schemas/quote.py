"""
Quote schemas for request validation.
"""

from pydantic import Field

from app.schemas.base import BaseSchema, PatchSchema


class QuoteCreate(BaseSchema):
    """Schema for creating a quote. ``client`` is the client's name."""
    
    description: str | None = None
    scope: list[str] | None = None
    total: str | None = Field(None, max_length=50)
    notes: str | None = None
    client: str = Field(..., min_length=1)


class QuoteUpdate(PatchSchema):
    """Schema for updating a quote."""
    
    description: str | None = None
    scope: list[str] | None = None
    total: str | None = Field(None, max_length=50)
    notes: str | None = None
