"""
Quote model for estimates sent to a client before a job.
"""

from typing import Optional, List
from sqlalchemy import String, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class Quote(BaseModel):
    """
    Quote model.
    
    Attributes:
        description: What the quote covers
        scope: Line-by-line scope of work
        total: Quoted amount, kept as a decimal string
        notes: Additional notes
        client_id: Client the quote was made for
    """
    
    __tablename__ = "quotes"
    
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    scope: Mapped[Optional[List[str]]] = mapped_column(JSON, default=list, nullable=True)
    total: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    
    client_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True, index=True)
    
    def __repr__(self) -> str:
        return f"<Quote(id={self.id}, total={self.total}, client_id={self.client_id})>"
