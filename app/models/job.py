"""
Job model: work carried out for a client, usually from an accepted quote.
"""

from typing import Optional, List
from sqlalchemy import String, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class Job(BaseModel):
    """Job model."""
    
    __tablename__ = "jobs"
    
    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    scope: Mapped[Optional[List[str]]] = mapped_column(JSON, default=list, nullable=True)
    total: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    notes: Mapped[Optional[List[str]]] = mapped_column(JSON, default=list, nullable=True)
    
    quote_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True, index=True)
    client_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True, index=True)
    user_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True, index=True)
    
    def __repr__(self) -> str:
        return f"<Job(id={self.id}, title='{self.title}', client_id={self.client_id})>"
