"""
Appointment schemas for request validation.
"""

from pydantic import Field

from app.schemas.base import BaseSchema, PatchSchema


class AppointmentCreate(BaseSchema):
    """Schema for creating an appointment. ``client`` is the client's name."""
    
    title: str | None = Field(None, max_length=255)
    details: str | None = None
    request_date: str | None = Field(None, max_length=50)
    app_time: str | None = Field(None, max_length=50)
    requested_on: str | None = Field(None, max_length=50)
    notes: list[str] | None = None
    client: str = Field(..., min_length=1)


class AppointmentUpdate(PatchSchema):
    """Schema for updating an appointment."""
    
    title: str | None = Field(None, max_length=255)
    details: str | None = None
    request_date: str | None = Field(None, max_length=50)
    app_time: str | None = Field(None, max_length=50)
    requested_on: str | None = Field(None, max_length=50)
    notes: list[str] | None = None
