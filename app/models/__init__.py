"""
Database models module.
All SQLAlchemy models are exported from here for easy imports.
"""

from app.models.address import Address
from app.models.client import Client
from app.models.appointment import Appointment
from app.models.quote import Quote
from app.models.job import Job
from app.models.invoice import Invoice
from app.models.user import User


__all__ = [
    "Address",
    "Client",
    "Appointment",
    "Quote",
    "Job",
    "Invoice",
    "User",
]
