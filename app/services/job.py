"""
Job service.
"""

import logging
from typing import Optional

from app.models.job import Job
from app.schemas.job import JobCreate
from app.services.client import ClientRecordService


logger = logging.getLogger(__name__)


class JobService(ClientRecordService[Job]):
    """Service for job operations."""
    
    model = Job
    
    async def create(self, data: JobCreate, user_id: Optional[str]) -> Job:
        """
        Create a job for the named client.
        
        The quote id is stored as given; it is only resolved when the
        job's ``quote`` field is read.
        """
        invalid_args = data.model_dump()
        client_id = await self.resolve_client_id(data.client, invalid_args)
        
        job = Job(
            title=data.title,
            description=data.description,
            scope=data.scope or [],
            total=data.total,
            notes=data.notes or [],
            quote_id=data.quote,
            client_id=client_id,
            user_id=user_id,
        )
        
        await self.save(job, invalid_args=invalid_args)
        logger.info(f"Chantier créé: {job.id} pour le client {client_id}")
        
        return job
