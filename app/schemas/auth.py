"""
Authentication schemas.
"""

from app.schemas.base import BaseSchema, Password


class LoginRequest(BaseSchema):
    """Login request schema."""
    
    email: str
    password: Password
