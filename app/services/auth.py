"""
Authentication service.
Handles user registration and login.
"""

import logging

from app.core.config import Settings
from app.core.errors import CredentialsError
from app.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
)
from app.models.user import User
from app.schemas.auth import LoginRequest
from app.schemas.user import UserCreate
from app.services.base import BaseService


logger = logging.getLogger(__name__)


class AuthService(BaseService[User]):
    """Service for authentication operations."""
    
    model = User
    conflict_message = "A user with this email already exists"
    
    def __init__(self, db, settings: Settings):
        super().__init__(db)
        self.settings = settings
    
    async def register(self, data: UserCreate) -> User:
        """
        Register a new user.
        
        Args:
            data: Registration data
            
        Returns:
            Created user
            
        Raises:
            InputValidationError: If email already exists
        """
        user = User(
            name=data.name,
            email=data.email,
            hashed_password=get_password_hash(data.password),
        )
        
        await self.save(user, invalid_args=data.model_dump())
        logger.info(f"Utilisateur créé: {user.email}")
        
        return user
    
    async def login(self, data: LoginRequest) -> tuple[User, str]:
        """
        Authenticate user and issue a token.
        
        Args:
            data: Login credentials
            
        Returns:
            Tuple of (user, access token)
            
        Raises:
            CredentialsError: If the email is unknown or the password wrong
        """
        user = await self.get_user_by_email(data.email)
        
        if not user or not verify_password(data.password, user.hashed_password):
            logger.warning(f"Échec de connexion pour {data.email}")
            raise CredentialsError()
        
        token = create_access_token(user.id, user.email, self.settings)
        
        return user, token
    
    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email."""
        return await self.find_one(User.email == email)
