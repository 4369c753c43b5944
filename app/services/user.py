"""
User service.
"""

from app.models.user import User
from app.services.base import BaseService


class UserService(BaseService[User]):
    """Service for user lookups."""
    
    model = User
