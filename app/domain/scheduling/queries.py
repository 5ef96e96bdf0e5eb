"""Read-only listings and appointment removal"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...models import Appointment, Service
from .exceptions import AppointmentNotFound, StorageUnavailable
from .repository import SchedulingRepository

logger = logging.getLogger(__name__)

MAX_APPOINTMENTS = 100


class SchedulingQueryService:
    """Service layer for listing services/appointments and deleting appointments"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = SchedulingRepository()

    def list_services(self) -> list[Service]:
        """All services ordered by id"""
        try:
            services = self.repo.find_services(self.db)
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to load services: {e}")
            raise StorageUnavailable("Erro ao buscar serviços") from e

        logger.info(f"📋 {len(services)} services returned")
        return services

    def list_recent_appointments(self, limit: int = MAX_APPOINTMENTS) -> list[Appointment]:
        """Latest appointments by slot, never more than MAX_APPOINTMENTS"""
        limit = max(1, min(limit, MAX_APPOINTMENTS))
        try:
            return self.repo.list_appointments(self.db, limit)
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to load appointments: {e}")
            raise StorageUnavailable("Erro ao buscar agendamentos") from e

    def delete_by_id(self, appointment_id: int) -> Appointment:
        """Delete an appointment unconditionally"""
        try:
            appointment = self.repo.delete_appointment(self.db, appointment_id)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to delete appointment #{appointment_id}: {e}")
            raise StorageUnavailable("Erro ao excluir agendamento") from e

        if appointment is None:
            logger.warning(f"⚠️ Appointment #{appointment_id} not found")
            raise AppointmentNotFound(appointment_id)

        logger.info(f"🗑️ Appointment #{appointment_id} deleted")
        return appointment
