"""
Appointment service.
"""

import logging
from typing import Optional

from app.models.appointment import Appointment
from app.schemas.appointment import AppointmentCreate
from app.services.client import ClientRecordService


logger = logging.getLogger(__name__)


class AppointmentService(ClientRecordService[Appointment]):
    """Service for appointment operations."""
    
    model = Appointment
    
    async def create(self, data: AppointmentCreate, user_id: Optional[str]) -> Appointment:
        """
        Create an appointment for the named client.
        
        Args:
            data: Appointment data, ``client`` being the client's name
            user_id: Id of the user booking the appointment, if any
            
        Returns:
            Created appointment
        """
        invalid_args = data.model_dump()
        client_id = await self.resolve_client_id(data.client, invalid_args)
        
        appointment = Appointment(
            title=data.title,
            details=data.details,
            request_date=data.request_date,
            app_time=data.app_time,
            requested_on=data.requested_on,
            notes=data.notes or [],
            user_id=user_id,
            client_id=client_id,
        )
        
        await self.save(appointment, invalid_args=invalid_args)
        logger.info(f"Rendez-vous créé: {appointment.id} pour le client {client_id}")
        
        return appointment
