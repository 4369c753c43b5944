"""
Invoice service.
"""

import logging

from app.models.invoice import Invoice
from app.schemas.invoice import InvoiceCreate
from app.services.client import ClientRecordService


logger = logging.getLogger(__name__)


class InvoiceService(ClientRecordService[Invoice]):
    """Service for invoice operations."""
    
    model = Invoice
    
    async def create(self, data: InvoiceCreate) -> Invoice:
        """Create an invoice for the named client."""
        invalid_args = data.model_dump()
        client_id = await self.resolve_client_id(data.client, invalid_args)
        
        invoice = Invoice(
            date_sent=data.date_sent,
            scope=data.scope or [],
            total=data.total,
            notes=data.notes or [],
            job_id=data.job,
            client_id=client_id,
        )
        
        await self.save(invoice, invalid_args=invalid_args)
        logger.info(f"Facture créée: {invoice.id} pour le client {client_id}")
        
        return invoice
