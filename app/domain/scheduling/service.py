"""Booking service - Business logic for creating appointments"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ...models import SLOT_CONSTRAINT_NAME, Appointment
from ...shared.validators import format_time
from .availability import AvailabilityService
from .exceptions import BookingValidationError, ErrorKind, SlotConflict, StorageUnavailable
from .repository import SchedulingRepository, to_store_date
from .schemas import BookingRequest
from .validation import validate_booking

logger = logging.getLogger(__name__)

BOOKING_FAILED_MESSAGE = "Erro ao realizar agendamento"


def is_slot_violation(error: IntegrityError) -> bool:
    """True when the integrity error comes from the (date, time) unique constraint"""
    message = str(error.orig).lower()
    if SLOT_CONSTRAINT_NAME in message:
        return True
    # SQLite names the columns instead of the constraint
    return "unique" in message and "hora_agendamento" in message


class BookingService:
    """
    Service layer for booking appointments.

    A booking is validated, checked against the schedule and inserted in a
    single transaction. The (date, time) unique constraint is what makes the
    check-then-insert race free: when two requests pass the check at the same
    time, the second insert fails and is reported as a slot conflict.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = SchedulingRepository()
        self.availability = AvailabilityService(db)

    def book(self, request: BookingRequest) -> Appointment:
        """Create an appointment or raise the reason it was rejected"""
        booking = validate_booking(request)
        hora = format_time(booking.hora)

        try:
            day = to_store_date(booking.data)
        except ValueError as e:
            logger.error(f"❌ Date {booking.data} rejected by the store: {e}")
            raise StorageUnavailable(BOOKING_FAILED_MESSAGE) from e

        try:
            occupied = self.availability.is_occupied(booking.data, booking.hora)
        except StorageUnavailable as e:
            self._abort()
            raise StorageUnavailable(BOOKING_FAILED_MESSAGE) from e

        if occupied:
            self._abort()
            logger.warning(f"⚠️ Slot {booking.data} {hora} already booked")
            raise SlotConflict(booking.data, hora)

        try:
            service = self.repo.find_service(self.db, booking.servico)
            if service is None:
                self._abort()
                logger.warning(f"⚠️ Booking rejected, unknown service: {booking.servico}")
                raise BookingValidationError(
                    ErrorKind.UNKNOWN_SERVICE,
                    "Serviço não encontrado",
                    {"recebido": booking.servico},
                )

            if self.repo.slot_is_taken(self.db, day, booking.hora):
                self._abort()
                logger.warning(f"⚠️ Slot {booking.data} {hora} taken before insert")
                raise SlotConflict(booking.data, hora)

            appointment = self.repo.insert_appointment(
                self.db,
                nome=booking.nome,
                telefone=booking.telefone,
                servico=service.nome_servico,
                data_agendamento=day,
                hora_agendamento=booking.hora,
            )
            self.db.commit()
        except IntegrityError as e:
            self._abort()
            if not is_slot_violation(e):
                logger.error(f"❌ Failed to create appointment: {e}")
                raise StorageUnavailable(BOOKING_FAILED_MESSAGE) from e
            logger.warning(f"⚠️ Slot {booking.data} {hora} lost to a concurrent booking: {e.orig}")
            raise SlotConflict(booking.data, hora) from e
        except SQLAlchemyError as e:
            self._abort()
            logger.error(f"❌ Failed to create appointment: {e}")
            raise StorageUnavailable(BOOKING_FAILED_MESSAGE) from e

        logger.info(
            f"✅ Appointment #{appointment.id_agendamento} created: "
            f"{appointment.nome} - {appointment.servico} on {booking.data} at {hora}"
        )
        return appointment

    def _abort(self) -> None:
        try:
            self.db.rollback()
        except SQLAlchemyError as e:
            logger.error(f"❌ Rollback failed: {e}")
