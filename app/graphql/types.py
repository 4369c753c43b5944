"""
GraphQL object types.

Each type is built from its model with ``from_model``. Stored references
are kept as private ids and resolved on demand, one point lookup per
field: a null id gives null, an id whose record is gone fails the field.
"""

from typing import List, Optional, Type

import strawberry
from strawberry.types import Info

from app.models.address import Address
from app.models.appointment import Appointment
from app.models.client import Client
from app.models.invoice import Invoice
from app.models.job import Job
from app.models.quote import Quote
from app.models.user import User
from app.services.appointment import AppointmentService
from app.services.base import BaseService
from app.services.client import AddressService, ClientService
from app.services.invoice import InvoiceService
from app.services.job import JobService
from app.services.quote import QuoteService
from app.services.user import UserService


async def resolve_reference(
    info: Info,
    service_class: Type[BaseService],
    record_id: Optional[str],
    type_class,
):
    """Point lookup of a referenced record, converted to its GraphQL type."""
    if record_id is None:
        return None
    record = await service_class(info.context.db).get_or_error(record_id)
    return type_class.from_model(record)


@strawberry.type(name="Address")
class AddressType:
    """Client address. Exposed without its own identifier."""

    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None

    @classmethod
    def from_model(cls, address: Address) -> "AddressType":
        return cls(
            street=address.street,
            city=address.city,
            state=address.state,
            zip=address.zip,
        )


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    name: Optional[str]
    email: Optional[str]

    @classmethod
    def from_model(cls, user: User) -> "UserType":
        return cls(id=strawberry.ID(user.id), name=user.name, email=user.email)


@strawberry.type(name="Token")
class TokenType:
    value: str


@strawberry.type(name="Client")
class ClientType:
    id: strawberry.ID
    name: str
    phone: Optional[str]
    email: Optional[str]
    tags: Optional[List[Optional[str]]]

    address_id: strawberry.Private[Optional[str]]

    @classmethod
    def from_model(cls, client: Client) -> "ClientType":
        return cls(
            id=strawberry.ID(client.id),
            name=client.name,
            phone=client.phone,
            email=client.email,
            tags=client.tags,
            address_id=client.address_id,
        )

    @strawberry.field
    async def address(self, info: Info) -> Optional[AddressType]:
        return await resolve_reference(info, AddressService, self.address_id, AddressType)

    @strawberry.field
    async def appointments(self, info: Info) -> List["AppointmentType"]:
        records = await AppointmentService(info.context.db).list_for_client(self.id)
        return [AppointmentType.from_model(record) for record in records]

    @strawberry.field
    async def quotes(self, info: Info) -> List["QuoteType"]:
        records = await QuoteService(info.context.db).list_for_client(self.id)
        return [QuoteType.from_model(record) for record in records]

    @strawberry.field
    async def jobs(self, info: Info) -> List["JobType"]:
        records = await JobService(info.context.db).list_for_client(self.id)
        return [JobType.from_model(record) for record in records]

    @strawberry.field
    async def invoices(self, info: Info) -> List["InvoiceType"]:
        records = await InvoiceService(info.context.db).list_for_client(self.id)
        return [InvoiceType.from_model(record) for record in records]


@strawberry.type(name="Appointment")
class AppointmentType:
    id: strawberry.ID
    title: Optional[str]
    details: Optional[str]
    request_date: Optional[str]
    app_time: Optional[str]
    requested_on: Optional[str]
    notes: Optional[List[Optional[str]]]

    user_id: strawberry.Private[Optional[str]]
    client_id: strawberry.Private[Optional[str]]

    @classmethod
    def from_model(cls, appointment: Appointment) -> "AppointmentType":
        return cls(
            id=strawberry.ID(appointment.id),
            title=appointment.title,
            details=appointment.details,
            request_date=appointment.request_date,
            app_time=appointment.app_time,
            requested_on=appointment.requested_on,
            notes=appointment.notes,
            user_id=appointment.user_id,
            client_id=appointment.client_id,
        )

    @strawberry.field
    async def user(self, info: Info) -> Optional[UserType]:
        return await resolve_reference(info, UserService, self.user_id, UserType)

    @strawberry.field
    async def client(self, info: Info) -> Optional[ClientType]:
        return await resolve_reference(info, ClientService, self.client_id, ClientType)


@strawberry.type(name="Quote")
class QuoteType:
    id: strawberry.ID
    description: Optional[str]
    scope: Optional[List[Optional[str]]]
    total: Optional[str]
    notes: Optional[str]

    client_id: strawberry.Private[Optional[str]]

    @classmethod
    def from_model(cls, quote: Quote) -> "QuoteType":
        return cls(
            id=strawberry.ID(quote.id),
            description=quote.description,
            scope=quote.scope,
            total=quote.total,
            notes=quote.notes,
            client_id=quote.client_id,
        )

    @strawberry.field
    async def client(self, info: Info) -> Optional[ClientType]:
        return await resolve_reference(info, ClientService, self.client_id, ClientType)


@strawberry.type(name="Job")
class JobType:
    id: strawberry.ID
    title: Optional[str]
    description: Optional[str]
    scope: Optional[List[Optional[str]]]
    total: Optional[str]
    notes: Optional[List[Optional[str]]]

    quote_id: strawberry.Private[Optional[str]]
    client_id: strawberry.Private[Optional[str]]
    user_id: strawberry.Private[Optional[str]]

    @classmethod
    def from_model(cls, job: Job) -> "JobType":
        return cls(
            id=strawberry.ID(job.id),
            title=job.title,
            description=job.description,
            scope=job.scope,
            total=job.total,
            notes=job.notes,
            quote_id=job.quote_id,
            client_id=job.client_id,
            user_id=job.user_id,
        )

    @strawberry.field
    async def quote(self, info: Info) -> Optional[QuoteType]:
        return await resolve_reference(info, QuoteService, self.quote_id, QuoteType)

    @strawberry.field
    async def client(self, info: Info) -> Optional[ClientType]:
        return await resolve_reference(info, ClientService, self.client_id, ClientType)

    @strawberry.field
    async def user(self, info: Info) -> Optional[UserType]:
        return await resolve_reference(info, UserService, self.user_id, UserType)


@strawberry.type(name="Invoice")
class InvoiceType:
    id: strawberry.ID
    date_sent: Optional[str]
    scope: Optional[List[Optional[str]]]
    total: Optional[str]
    notes: Optional[List[Optional[str]]]

    job_id: strawberry.Private[Optional[str]]
    client_id: strawberry.Private[Optional[str]]

    @classmethod
    def from_model(cls, invoice: Invoice) -> "InvoiceType":
        return cls(
            id=strawberry.ID(invoice.id),
            date_sent=invoice.date_sent,
            scope=invoice.scope,
            total=invoice.total,
            notes=invoice.notes,
            job_id=invoice.job_id,
            client_id=invoice.client_id,
        )

    @strawberry.field
    async def job(self, info: Info) -> Optional[JobType]:
        return await resolve_reference(info, JobService, self.job_id, JobType)

    @strawberry.field
    async def client(self, info: Info) -> Optional[ClientType]:
        return await resolve_reference(info, ClientService, self.client_id, ClientType)
