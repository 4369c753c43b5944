"""
Pydantic schemas for request validation.
"""

from app.schemas.client import ClientCreate, ClientUpdate
from app.schemas.appointment import AppointmentCreate, AppointmentUpdate
from app.schemas.quote import QuoteCreate, QuoteUpdate
from app.schemas.job import JobCreate, JobUpdate
from app.schemas.invoice import InvoiceCreate, InvoiceUpdate
from app.schemas.user import UserCreate
from app.schemas.auth import LoginRequest

__all__ = [
    # Client
    "ClientCreate",
    "ClientUpdate",
    # Appointment
    "AppointmentCreate",
    "AppointmentUpdate",
    # Quote
    "QuoteCreate",
    "QuoteUpdate",
    # Job
    "JobCreate",
    "JobUpdate",
    # Invoice
    "InvoiceCreate",
    "InvoiceUpdate",
    # User / auth
    "UserCreate",
    "LoginRequest",
]
