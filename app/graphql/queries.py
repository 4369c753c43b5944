"""
GraphQL queries. Reads are public.
"""

from typing import List, Optional

import strawberry
from strawberry.types import Info

from app.graphql.types import (
    AppointmentType,
    ClientType,
    InvoiceType,
    JobType,
    QuoteType,
    UserType,
)
from app.services.appointment import AppointmentService
from app.services.client import ClientService
from app.services.invoice import InvoiceService
from app.services.job import JobService
from app.services.quote import QuoteService


@strawberry.type
class Query:
    """GraphQL queries."""

    @strawberry.field(name="allClients")
    async def all_clients(self, info: Info) -> List[ClientType]:
        records = await ClientService(info.context.db).list_all()
        return [ClientType.from_model(record) for record in records]

    @strawberry.field(name="allAppointments")
    async def all_appointments(self, info: Info) -> List[AppointmentType]:
        records = await AppointmentService(info.context.db).list_all()
        return [AppointmentType.from_model(record) for record in records]

    @strawberry.field(name="allQuotes")
    async def all_quotes(self, info: Info) -> List[QuoteType]:
        records = await QuoteService(info.context.db).list_all()
        return [QuoteType.from_model(record) for record in records]

    @strawberry.field(name="allJobs")
    async def all_jobs(self, info: Info) -> List[JobType]:
        records = await JobService(info.context.db).list_all()
        return [JobType.from_model(record) for record in records]

    @strawberry.field(name="allInvoices")
    async def all_invoices(self, info: Info) -> List[InvoiceType]:
        records = await InvoiceService(info.context.db).list_all()
        return [InvoiceType.from_model(record) for record in records]

    @strawberry.field
    def me(self, info: Info) -> Optional[UserType]:
        """Get current authenticated user, null when anonymous."""
        user = info.context.current_user
        if user is None:
            return None
        return UserType.from_model(user)
