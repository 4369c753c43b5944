"""
Client schemas for request validation.
"""

from pydantic import Field, field_validator

from app.schemas.base import BaseSchema, PatchSchema


ADDRESS_FIELDS = ("street", "city", "state", "zip")


class ClientCreate(BaseSchema):
    """Schema for creating a new client with its address."""
    
    name: str = Field(..., min_length=5, max_length=255)
    phone: str | None = Field(None, min_length=5, max_length=50)
    email: str | None = Field(None, min_length=8, max_length=255)
    tags: list[str] | None = None
    street: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    zip: str | None = Field(None, max_length=20)

    def address_data(self) -> dict:
        return self.model_dump(include=set(ADDRESS_FIELDS))

    def client_data(self) -> dict:
        return self.model_dump(exclude=set(ADDRESS_FIELDS))


class ClientUpdate(PatchSchema):
    """Schema for updating a client. ``name`` is the new name."""
    
    name: str | None = Field(None, min_length=5, max_length=255)
    phone: str | None = Field(None, min_length=5, max_length=50)
    email: str | None = Field(None, min_length=8, max_length=255)
    tags: list[str] | None = None
    street: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    zip: str | None = Field(None, max_length=20)

    @field_validator("name")
    @classmethod
    def name_cannot_be_cleared(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("name cannot be null")
        return value

    def address_changes(self) -> dict:
        return {
            field: value
            for field, value in self.changes().items()
            if field in ADDRESS_FIELDS
        }

    def client_changes(self) -> dict:
        return {
            field: value
            for field, value in self.changes().items()
            if field not in ADDRESS_FIELDS
        }
