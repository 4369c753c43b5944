"""
Invoice schemas for request validation.
"""

from pydantic import Field

from app.schemas.base import BaseSchema, PatchSchema


class InvoiceCreate(BaseSchema):
    """
    Schema for creating an invoice.

    ``job`` is a job id, ``client`` is the client's name.
    """
    
    date_sent: str | None = Field(None, max_length=50)
    scope: list[str] | None = None
    total: str | None = Field(None, max_length=50)
    notes: list[str] | None = None
    job: str | None = None
    client: str = Field(..., min_length=1)


class InvoiceUpdate(PatchSchema):
    """Schema for updating an invoice."""
    
    date_sent: str | None = Field(None, max_length=50)
    scope: list[str] | None = None
    total: str | None = Field(None, max_length=50)
    notes: list[str] | None = None
