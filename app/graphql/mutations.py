"""
GraphQL mutations.

Every mutation but ``createUser`` and ``login`` requires a signed-in user;
creation mutations follow ``REQUIRE_AUTH_FOR_CREATE``. Update arguments
default to ``UNSET`` so an omitted argument is never confused with an
explicit null.
"""

import logging
from typing import Any, List, Optional, Type, TypeVar

import strawberry
from pydantic import ValidationError
from strawberry import UNSET
from strawberry.types import Info

from app.core.errors import InputValidationError
from app.graphql.permissions import require_user, require_user_for_create
from app.graphql.types import (
    AppointmentType,
    ClientType,
    InvoiceType,
    JobType,
    QuoteType,
    TokenType,
    UserType,
)
from app.schemas.appointment import AppointmentCreate, AppointmentUpdate
from app.schemas.auth import LoginRequest
from app.schemas.base import BaseSchema
from app.schemas.client import ClientCreate, ClientUpdate
from app.schemas.invoice import InvoiceCreate, InvoiceUpdate
from app.schemas.job import JobCreate, JobUpdate
from app.schemas.quote import QuoteCreate, QuoteUpdate
from app.schemas.user import UserCreate
from app.services.appointment import AppointmentService
from app.services.auth import AuthService
from app.services.client import ClientService
from app.services.invoice import InvoiceService
from app.services.job import JobService
from app.services.quote import QuoteService


logger = logging.getLogger(__name__)

SchemaType = TypeVar("SchemaType", bound=BaseSchema)


def supplied(**arguments: Any) -> dict[str, Any]:
    """Keep the arguments present in the request."""
    return {
        name: value
        for name, value in arguments.items()
        if value is not UNSET
    }


def validate(
    schema_class: Type[SchemaType],
    arguments: dict[str, Any],
    invalid_args: Optional[dict[str, Any]] = None,
) -> SchemaType:
    """Validate arguments against a schema, as an input error on failure."""
    try:
        return schema_class(**arguments)
    except ValidationError as exc:
        raise InputValidationError.from_validation_error(
            exc,
            invalid_args=arguments if invalid_args is None else invalid_args,
        ) from exc


@strawberry.type
class Mutation:
    """GraphQL mutations."""

    # Creation

    @strawberry.mutation(name="addClient")
    async def add_client(
        self,
        info: Info,
        name: str,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        tags: Optional[List[str]] = None,
        street: Optional[str] = None,
        city: Optional[str] = None,
        state: Optional[str] = None,
        zip: Optional[str] = None,
    ) -> Optional[ClientType]:
        """Create a client together with its address."""
        require_user_for_create(info)
        data = validate(ClientCreate, dict(
            name=name,
            phone=phone,
            email=email,
            tags=tags,
            street=street,
            city=city,
            state=state,
            zip=zip,
        ))
        client = await ClientService(info.context.db).create(data)
        return ClientType.from_model(client)

    @strawberry.mutation(name="addAppointment")
    async def add_appointment(
        self,
        info: Info,
        client: str,
        title: Optional[str] = None,
        details: Optional[str] = None,
        request_date: Optional[str] = None,
        app_time: Optional[str] = None,
        requested_on: Optional[str] = None,
        notes: Optional[List[str]] = None,
    ) -> Optional[AppointmentType]:
        """Create an appointment for the client with this name."""
        user_id = require_user_for_create(info)
        data = validate(AppointmentCreate, dict(
            title=title,
            details=details,
            request_date=request_date,
            app_time=app_time,
            requested_on=requested_on,
            notes=notes,
            client=client,
        ))
        appointment = await AppointmentService(info.context.db).create(data, user_id)
        return AppointmentType.from_model(appointment)

    @strawberry.mutation(name="addQuote")
    async def add_quote(
        self,
        info: Info,
        client: str,
        description: Optional[str] = None,
        scope: Optional[List[str]] = None,
        total: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Optional[QuoteType]:
        """Create a quote for the client with this name."""
        require_user_for_create(info)
        data = validate(QuoteCreate, dict(
            description=description,
            scope=scope,
            total=total,
            notes=notes,
            client=client,
        ))
        quote = await QuoteService(info.context.db).create(data)
        return QuoteType.from_model(quote)

    @strawberry.mutation(name="addJob")
    async def add_job(
        self,
        info: Info,
        client: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
        scope: Optional[List[str]] = None,
        total: Optional[str] = None,
        notes: Optional[List[str]] = None,
        quote: Optional[strawberry.ID] = None,
    ) -> Optional[JobType]:
        """Create a job for the client with this name, from a quote id."""
        user_id = require_user_for_create(info)
        data = validate(JobCreate, dict(
            title=title,
            description=description,
            scope=scope,
            total=total,
            notes=notes,
            quote=quote,
            client=client,
        ))
        job = await JobService(info.context.db).create(data, user_id)
        return JobType.from_model(job)

    @strawberry.mutation(name="addInvoice")
    async def add_invoice(
        self,
        info: Info,
        client: str,
        date_sent: Optional[str] = None,
        scope: Optional[List[str]] = None,
        total: Optional[str] = None,
        notes: Optional[List[str]] = None,
        job: Optional[strawberry.ID] = None,
    ) -> Optional[InvoiceType]:
        """Create an invoice for the client with this name, from a job id."""
        require_user_for_create(info)
        data = validate(InvoiceCreate, dict(
            date_sent=date_sent,
            scope=scope,
            total=total,
            notes=notes,
            job=job,
            client=client,
        ))
        invoice = await InvoiceService(info.context.db).create(data)
        return InvoiceType.from_model(invoice)

    # Updates

    @strawberry.mutation(name="updateClient")
    async def update_client(
        self,
        info: Info,
        name: str,
        new_name: Optional[str] = UNSET,
        phone: Optional[str] = UNSET,
        email: Optional[str] = UNSET,
        tags: Optional[List[str]] = UNSET,
        street: Optional[str] = UNSET,
        city: Optional[str] = UNSET,
        state: Optional[str] = UNSET,
        zip: Optional[str] = UNSET,
    ) -> Optional[ClientType]:
        """Update the client with this name. ``new_name`` renames it."""
        require_user(info)
        arguments = supplied(
            new_name=new_name,
            phone=phone,
            email=email,
            tags=tags,
            street=street,
            city=city,
            state=state,
            zip=zip,
        )
        invalid_args = {"name": name, **arguments}

        changes = dict(arguments)
        if "new_name" in changes:
            changes["name"] = changes.pop("new_name")
        data = validate(ClientUpdate, changes, invalid_args)

        service = ClientService(info.context.db)
        client = await service.get_by_name_or_error(name, invalid_args)
        client = await service.update(client, data, invalid_args)
        return ClientType.from_model(client)

    @strawberry.mutation(name="updateAppointment")
    async def update_appointment(
        self,
        info: Info,
        id: strawberry.ID,
        title: Optional[str] = UNSET,
        details: Optional[str] = UNSET,
        request_date: Optional[str] = UNSET,
        app_time: Optional[str] = UNSET,
        requested_on: Optional[str] = UNSET,
        notes: Optional[List[str]] = UNSET,
    ) -> Optional[AppointmentType]:
        require_user(info)
        arguments = supplied(
            title=title,
            details=details,
            request_date=request_date,
            app_time=app_time,
            requested_on=requested_on,
            notes=notes,
        )
        invalid_args = {"id": id, **arguments}
        data = validate(AppointmentUpdate, arguments, invalid_args)

        service = AppointmentService(info.context.db)
        appointment = await service.get_for_update(id, invalid_args)
        appointment = await service.update(appointment, data, invalid_args)
        return AppointmentType.from_model(appointment)

    @strawberry.mutation(name="updateQuote")
    async def update_quote(
        self,
        info: Info,
        id: strawberry.ID,
        description: Optional[str] = UNSET,
        scope: Optional[List[str]] = UNSET,
        total: Optional[str] = UNSET,
        notes: Optional[str] = UNSET,
    ) -> Optional[QuoteType]:
        require_user(info)
        arguments = supplied(
            description=description,
            scope=scope,
            total=total,
            notes=notes,
        )
        invalid_args = {"id": id, **arguments}
        data = validate(QuoteUpdate, arguments, invalid_args)

        service = QuoteService(info.context.db)
        quote = await service.get_for_update(id, invalid_args)
        quote = await service.update(quote, data, invalid_args)
        return QuoteType.from_model(quote)

    @strawberry.mutation(name="updateJob")
    async def update_job(
        self,
        info: Info,
        id: strawberry.ID,
        title: Optional[str] = UNSET,
        description: Optional[str] = UNSET,
        scope: Optional[List[str]] = UNSET,
        total: Optional[str] = UNSET,
        notes: Optional[List[str]] = UNSET,
    ) -> Optional[JobType]:
        require_user(info)
        arguments = supplied(
            title=title,
            description=description,
            scope=scope,
            total=total,
            notes=notes,
        )
        invalid_args = {"id": id, **arguments}
        data = validate(JobUpdate, arguments, invalid_args)

        service = JobService(info.context.db)
        job = await service.get_for_update(id, invalid_args)
        job = await service.update(job, data, invalid_args)
        return JobType.from_model(job)

    @strawberry.mutation(name="updateInvoice")
    async def update_invoice(
        self,
        info: Info,
        id: strawberry.ID,
        date_sent: Optional[str] = UNSET,
        scope: Optional[List[str]] = UNSET,
        total: Optional[str] = UNSET,
        notes: Optional[List[str]] = UNSET,
    ) -> Optional[InvoiceType]:
        require_user(info)
        arguments = supplied(
            date_sent=date_sent,
            scope=scope,
            total=total,
            notes=notes,
        )
        invalid_args = {"id": id, **arguments}
        data = validate(InvoiceUpdate, arguments, invalid_args)

        service = InvoiceService(info.context.db)
        invoice = await service.get_for_update(id, invalid_args)
        invoice = await service.update(invoice, data, invalid_args)
        return InvoiceType.from_model(invoice)

    # Users

    @strawberry.mutation(name="createUser")
    async def create_user(
        self,
        info: Info,
        name: str,
        email: str,
        password: str,
    ) -> Optional[UserType]:
        """Register a user. The password is stored hashed only."""
        data = validate(UserCreate, dict(name=name, email=email, password=password))
        service = AuthService(info.context.db, info.context.settings)
        user = await service.register(data)
        return UserType.from_model(user)

    @strawberry.mutation
    async def login(
        self,
        info: Info,
        email: str,
        password: str,
    ) -> Optional[TokenType]:
        """Exchange email and password for a bearer token."""
        data = LoginRequest(email=email, password=password)
        service = AuthService(info.context.db, info.context.settings)
        _, token = await service.login(data)
        return TokenType(value=token)
