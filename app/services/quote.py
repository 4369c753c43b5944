"""
Quote service.
"""

import logging

from app.models.quote import Quote
from app.schemas.quote import QuoteCreate
from app.services.client import ClientRecordService


logger = logging.getLogger(__name__)


class QuoteService(ClientRecordService[Quote]):
    """Service for quote operations."""
    
    model = Quote
    
    async def create(self, data: QuoteCreate) -> Quote:
        """Create a quote for the named client."""
        invalid_args = data.model_dump()
        client_id = await self.resolve_client_id(data.client, invalid_args)
        
        quote = Quote(
            description=data.description,
            scope=data.scope or [],
            total=data.total,
            notes=data.notes,
            client_id=client_id,
        )
        
        await self.save(quote, invalid_args=invalid_args)
        logger.info(f"Devis créé: {quote.id} pour le client {client_id}")
        
        return quote
