"""
Invoice model: billing for a completed job.
"""

from typing import Optional, List
from sqlalchemy import String, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class Invoice(BaseModel):
    """
    Invoice model.
    
    Attributes:
        date_sent: Date the invoice was sent to the client
        scope: Billed items
        total: Billed amount, kept as a decimal string
        notes: Additional notes
        job_id: Job being billed
        client_id: Client being billed
    """
    
    __tablename__ = "invoices"
    
    date_sent: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    scope: Mapped[Optional[List[str]]] = mapped_column(JSON, default=list, nullable=True)
    total: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    notes: Mapped[Optional[List[str]]] = mapped_column(JSON, default=list, nullable=True)
    
    job_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True, index=True)
    client_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True, index=True)
    
    def __repr__(self) -> str:
        return f"<Invoice(id={self.id}, total={self.total}, client_id={self.client_id})>"
