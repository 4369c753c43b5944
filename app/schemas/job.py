"""
Job schemas for request validation.
"""

from pydantic import Field

from app.schemas.base import BaseSchema, PatchSchema


class JobCreate(BaseSchema):
    """
    Schema for creating a job.

    ``quote`` is a quote id, ``client`` is the client's name.
    """
    
    title: str | None = Field(None, max_length=255)
    description: str | None = None
    scope: list[str] | None = None
    total: str | None = Field(None, max_length=50)
    notes: list[str] | None = None
    quote: str | None = None
    client: str = Field(..., min_length=1)


class JobUpdate(PatchSchema):
    """Schema for updating a job."""
    
    title: str | None = Field(None, max_length=255)
    description: str | None = None
    scope: list[str] | None = None
    total: str | None = Field(None, max_length=50)
    notes: list[str] | None = None
