"""
Address model. Each address belongs to exactly one client.
"""

from typing import Optional
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class Address(BaseModel):
    """
    Postal address of a client.

    Created together with its client and only updated through it.
    """
    
    __tablename__ = "addresses"
    
    street: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    zip: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    
    def __repr__(self) -> str:
        return f"<Address(id={self.id}, city='{self.city}')>"
