"""Scheduling repository - Database operations for services and appointments"""

from datetime import date, datetime, time
from typing import Optional

from sqlalchemy import delete, func, or_, select
from sqlalchemy.orm import Session

from ...models import Appointment, Service


def to_store_date(value: str) -> date:
    """
    Convert a YYYY-MM-DD string into a date column value.

    Raises:
        ValueError: for strings that are not calendar dates (e.g. 2025-02-30)
    """
    return date.fromisoformat(value)


class SchedulingRepository:
    """Repository for scheduling database operations"""

    @staticmethod
    def find_services(db: Session) -> list[Service]:
        """Get all services ordered by id"""
        return db.query(Service).order_by(Service.id_servico.asc()).all()

    @staticmethod
    def find_service(db: Session, identifier: str) -> Optional[Service]:
        """Get a service by exact name, or by id when the identifier is numeric"""
        conditions = [Service.nome_servico == identifier]
        if identifier.isdigit():
            conditions.append(Service.id_servico == int(identifier))

        return (
            db.query(Service)
            .filter(or_(*conditions))
            .order_by(Service.id_servico.asc())
            .first()
        )

    @staticmethod
    def find_occupied_slots(db: Session, day: date) -> list[Appointment]:
        """Get the appointments booked on a date ordered by time"""
        return (
            db.query(Appointment)
            .filter(Appointment.data_agendamento == day)
            .order_by(Appointment.hora_agendamento.asc())
            .all()
        )

    @staticmethod
    def slot_is_taken(db: Session, day: date, hour: time) -> bool:
        """Check a slot inside the booking transaction, locking the row if it exists"""
        existing = (
            db.query(Appointment.id_agendamento)
            .filter(
                Appointment.data_agendamento == day,
                Appointment.hora_agendamento == hour,
            )
            .with_for_update()
            .first()
        )
        return existing is not None

    @staticmethod
    def insert_appointment(db: Session, **appointment_data) -> Appointment:
        """Stage a new appointment; the caller owns commit/rollback"""
        appointment = Appointment(**appointment_data)
        db.add(appointment)
        db.flush()
        return appointment

    @staticmethod
    def list_appointments(db: Session, limit: int) -> list[Appointment]:
        """Get the most recent appointments by slot, newest first"""
        return (
            db.query(Appointment)
            .order_by(
                Appointment.data_agendamento.desc(),
                Appointment.hora_agendamento.desc(),
                Appointment.id_agendamento.desc(),
            )
            .limit(limit)
            .all()
        )

    @staticmethod
    def delete_appointment(db: Session, appointment_id: int) -> Optional[Appointment]:
        """
        Delete an appointment in a single statement; the caller owns commit/rollback.

        Returns the removed row, or None when no row matched (including when a
        concurrent delete got there first).
        """
        result = db.execute(
            delete(Appointment)
            .where(Appointment.id_agendamento == appointment_id)
            .returning(Appointment)
        )
        return result.scalars().first()

    @staticmethod
    def ping(db: Session) -> datetime:
        """Round-trip to the store, returning its clock"""
        return db.execute(select(func.now())).scalar()
