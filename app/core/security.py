"""
Security utilities for authentication.
JWT token handling and password hashing.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
import bcrypt
from jose import JWTError, jwt
from pydantic import BaseModel

from app.core.config import Settings


class TokenData(BaseModel):
    """Token payload data."""
    user_id: str
    email: Optional[str] = None
    token_type: str = "access"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return bcrypt.checkpw(
        plain_password.encode('utf-8'),
        hashed_password.encode('utf-8')
    )


def get_password_hash(password: str) -> str:
    """Generate password hash."""
    return bcrypt.hashpw(
        password.encode('utf-8'),
        bcrypt.gensalt()
    ).decode('utf-8')


def create_access_token(
    user_id: str,
    email: str,
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create JWT access token binding a user id and email.

    Args:
        user_id: User ID, stored as the ``sub`` claim
        email: User email
        settings: Signing secret, algorithm and default lifetime
        expires_delta: Token lifetime overriding the configured one

    Returns:
        Encoded JWT token
    """
    now = datetime.now(timezone.utc)
    to_encode = {
        "sub": user_id,
        "email": email,
        "iat": now,
        "type": "access",
    }

    if expires_delta is None and settings.ACCESS_TOKEN_EXPIRE_MINUTES is not None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    if expires_delta is not None:
        to_encode["exp"] = now + expires_delta

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )


def decode_token(token: str, settings: Settings) -> Optional[TokenData]:
    """
    Decode and validate JWT token.

    Args:
        token: JWT token to decode
        settings: Signing secret and algorithm

    Returns:
        TokenData if valid, None otherwise (bad signature, expired, no subject)
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM]
        )
    except JWTError:
        return None

    user_id = payload.get("sub")
    if not user_id:
        return None

    return TokenData(
        user_id=str(user_id),
        email=payload.get("email"),
        token_type=payload.get("type", "access"),
    )
