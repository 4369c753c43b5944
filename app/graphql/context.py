"""
GraphQL request context.

Resolves the ``Authorization`` header to the current user. A request is
either anonymous (``current_user`` is None) or authenticated; building the
context never fails the request, protected mutations check it themselves.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext

from app.core.config import Settings
from app.core.database import get_db
from app.core.security import decode_token
from app.models.user import User
from app.services.user import UserService


logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


class GraphQLContext(BaseContext):
    """Per-request context handed to every resolver."""

    def __init__(
        self,
        db: AsyncSession,
        settings: Settings,
        current_user: Optional[User] = None,
    ):
        super().__init__()
        self.db = db
        self.settings = settings
        self.current_user = current_user
        # Kept apart from the ORM row, which a rolled back save expires
        self.current_user_id = current_user.id if current_user else None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user_id is not None


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token of a ``Bearer <token>`` header, prefix case-insensitive."""
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


async def authenticate(
    db: AsyncSession,
    settings: Settings,
    authorization: Optional[str],
) -> Optional[User]:
    """
    Resolve an Authorization header to a user.

    Returns:
        The user, or None for a missing or malformed header, an invalid or
        expired token, or a token whose user no longer exists
    """
    token = extract_bearer_token(authorization)
    if token is None:
        return None

    token_data = decode_token(token, settings)
    if token_data is None:
        logger.warning("Token invalide ou expiré")
        return None

    if token_data.token_type != "access":
        logger.warning("Type de token invalide")
        return None

    user = await UserService(db).get_by_id(token_data.user_id)
    if user is None:
        logger.warning(f"Utilisateur {token_data.user_id} non trouvé")
        return None

    logger.debug(f"Utilisateur authentifié: {user.email}")
    return user


async def get_context(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> GraphQLContext:
    """Build the context of one GraphQL request."""
    settings = request.app.state.settings
    current_user = await authenticate(
        db,
        settings,
        request.headers.get("Authorization"),
    )
    return GraphQLContext(db=db, settings=settings, current_user=current_user)
