"""Availability resolver - occupied slots for a date"""

import logging
from datetime import time

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...models import Appointment
from .exceptions import StorageUnavailable
from .repository import SchedulingRepository, to_store_date

logger = logging.getLogger(__name__)


class AvailabilityService:
    """Read side of the schedule, always served from the database"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = SchedulingRepository()

    def occupied_slots(self, data: str) -> list[Appointment]:
        """Appointments booked on ``data`` (YYYY-MM-DD), ordered by time"""
        try:
            day = to_store_date(data)
        except ValueError as e:
            # Same outcome as the database rejecting an out-of-range date
            logger.error(f"❌ Date {data} rejected by the store: {e}")
            raise StorageUnavailable("Erro ao verificar disponibilidade") from e

        try:
            slots = self.repo.find_occupied_slots(self.db, day)
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to load occupied slots for {data}: {e}")
            raise StorageUnavailable("Erro ao verificar disponibilidade") from e

        logger.info(f"📅 {len(slots)} occupied slots on {data}")
        return slots

    def is_occupied(self, data: str, hora: time) -> bool:
        """Exact time-of-day match against the occupied slots of the date"""
        return any(slot.hora_agendamento == hora for slot in self.occupied_slots(data))
