"""
Appointment model: a visit requested by a client.
"""

from typing import Optional, List
from sqlalchemy import String, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class Appointment(BaseModel):
    """
    Appointment model.
    
    Attributes:
        title: Short label
        details: Free text description
        request_date: Date the client asked for
        app_time: Scheduled time
        requested_on: Date the request was made
        notes: Follow-up notes
        user_id: User who booked the appointment
        client_id: Client the appointment is for
    """
    
    __tablename__ = "appointments"
    
    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    details: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    request_date: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    app_time: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    requested_on: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    notes: Mapped[Optional[List[str]]] = mapped_column(JSON, default=list, nullable=True)
    
    user_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True, index=True)
    client_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True, index=True)
    
    def __repr__(self) -> str:
        return f"<Appointment(id={self.id}, title='{self.title}', client_id={self.client_id})>"
