"""
Authorization checks for mutations.

Called first thing in a resolver, before any store access.
"""

from typing import Optional

from strawberry.types import Info

from app.core.errors import AuthenticationError


def require_user(info: Info) -> str:
    """Return the current user's id or fail with an authentication error."""
    user_id = info.context.current_user_id
    if user_id is None:
        raise AuthenticationError()
    return user_id


def require_user_for_create(info: Info) -> Optional[str]:
    """
    Authorization for creation mutations.

    Enforced unless ``REQUIRE_AUTH_FOR_CREATE`` is turned off, in which
    case the current user's id (possibly None) is returned.
    """
    if info.context.settings.REQUIRE_AUTH_FOR_CREATE:
        return require_user(info)
    return info.context.current_user_id
