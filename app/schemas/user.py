"""
User schemas for request validation.
"""

from pydantic import Field

from app.schemas.base import BaseSchema, Password


class UserCreate(BaseSchema):
    """Schema for creating a new user."""
    
    name: str = Field(..., min_length=4, max_length=255)
    email: str = Field(..., min_length=7, max_length=255)
    password: Password = Field(..., min_length=1)
