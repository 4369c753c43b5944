"""
Client service.
Handles client and address creation, lookups and updates.
"""

import logging
from typing import Any, Optional

from app.core.errors import InputValidationError
from app.models.address import Address
from app.models.client import Client
from app.models.base import new_id
from app.schemas.base import PatchSchema
from app.schemas.client import ClientCreate, ClientUpdate
from app.services.base import BaseService, ModelType


logger = logging.getLogger(__name__)


class AddressService(BaseService[Address]):
    """Service for address lookups."""

    model = Address


class ClientService(BaseService[Client]):
    """Service for client operations."""
    
    model = Client
    conflict_message = "A client with this name already exists"
    
    def _build_address(self, data: ClientCreate) -> Address:
        return Address(id=new_id(), **data.address_data())
    
    async def create(self, data: ClientCreate) -> Client:
        """
        Create a new client and its address.
        
        The client is flushed before the address, both in the same
        transaction: if either insert fails neither record is kept.
        
        Args:
            data: Client data, including address fields
            
        Returns:
            Created client
        """
        address = self._build_address(data)
        client = Client(
            id=new_id(),
            address_id=address.id,
            **data.client_data(),
        )
        
        await self.save(client, address, invalid_args=data.model_dump())
        logger.info(f"Client créé: {client.name} ({client.id})")
        
        return client
    
    async def get_by_name(self, name: str) -> Client | None:
        """Get client by its unique name."""
        return await self.find_one(Client.name == name)
    
    async def get_by_name_or_error(
        self,
        name: str,
        invalid_args: Optional[dict[str, Any]] = None,
    ) -> Client:
        """
        Get client by name or raise.
        
        Raises:
            InputValidationError: If no client has this name
        """
        client = await self.get_by_name(name)
        if client is None:
            raise InputValidationError(
                f"Client '{name}' not found",
                invalid_args=invalid_args,
            )
        return client
    
    async def update(
        self,
        client: Client,
        data: ClientUpdate,
        invalid_args: Optional[dict[str, Any]] = None,
    ) -> Client:
        """
        Update client and, for supplied address fields, its address.
        
        Args:
            client: Client to update
            data: Update data, only explicitly set fields are applied
            invalid_args: Submitted arguments reported on failure
            
        Returns:
            Updated client
        """
        records: list = [client]
        
        for field, value in data.client_changes().items():
            setattr(client, field, value)
        
        address_changes = data.address_changes()
        if address_changes:
            address = None
            if client.address_id is not None:
                address = await AddressService(self.db).get_by_id(client.address_id)
            if address is None:
                # Missing address record is recreated from the supplied fields
                address = Address(id=new_id())
                client.address_id = address.id
            for field, value in address_changes.items():
                setattr(address, field, value)
            records.append(address)
        
        await self.save(*records, invalid_args=invalid_args)
        
        return client


class ClientRecordService(BaseService[ModelType]):
    """
    Base for records that point to a client (appointments, quotes,
    jobs, invoices).
    """
    
    async def list_for_client(self, client_id: str) -> list[ModelType]:
        """All records referencing the client, unordered."""
        return await self.find_many(self.model.client_id == client_id)
    
    async def resolve_client_id(
        self,
        name: str,
        invalid_args: Optional[dict[str, Any]] = None,
    ) -> str:
        """
        Resolve a client name given at the API boundary to the stored id.
        
        Raises:
            InputValidationError: If no client has this name
        """
        client = await ClientService(self.db).get_by_name_or_error(name, invalid_args)
        return client.id
    
    async def update(
        self,
        record: ModelType,
        data: PatchSchema,
        invalid_args: Optional[dict[str, Any]] = None,
    ) -> ModelType:
        """
        Update record.
        
        Args:
            record: Record to update
            data: Update data, only explicitly set fields are applied
            invalid_args: Submitted arguments reported on failure
            
        Returns:
            Updated record
        """
        return await self.apply_patch(record, data.changes(), invalid_args)
