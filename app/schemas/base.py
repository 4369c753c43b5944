"""
Base schema configuration and common schemas.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints


# Passwords are hashed and compared exactly as typed
Password = Annotated[str, StringConstraints(strip_whitespace=False)]


class BaseSchema(BaseModel):
    """Base schema with common configuration."""
    
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class PatchSchema(BaseSchema):
    """
    Base for sparse updates.

    Only fields explicitly supplied are "set"; services apply
    ``model_dump(exclude_unset=True)`` so omitted fields stay untouched.
    """

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)