"""
Client model for managing customers.
Appointments, quotes, jobs and invoices point back to a client by id.
"""

from typing import Optional, List
from sqlalchemy import String, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class Client(BaseModel):
    """
    Client model representing a customer.
    
    Attributes:
        name: Client's full name or company name (unique)
        phone: Client's phone number
        email: Client's email address
        tags: Ordered free-form labels
        address_id: Identifier of the client's Address record
    """
    
    __tablename__ = "clients"
    
    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    phone: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )
    email: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    tags: Mapped[Optional[List[str]]] = mapped_column(
        JSON,
        default=list,
        nullable=True,
    )
    address_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        nullable=True,
    )
    
    def __repr__(self) -> str:
        return f"<Client(id={self.id}, name='{self.name}')>"
