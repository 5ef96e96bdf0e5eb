"""Scheduling router - FastAPI endpoints for the booking API"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...database import get_db
from ...shared.validators import format_time, validate_date_format
from .availability import AvailabilityService
from .queries import MAX_APPOINTMENTS, SchedulingQueryService
from .repository import SchedulingRepository
from .schemas import (
    AppointmentDeletedResponse,
    AppointmentListResponse,
    AppointmentResponse,
    AvailabilityResponse,
    BookingCreatedResponse,
    BookingDetails,
    BookingRequest,
    OccupiedSlot,
    ServiceResponse,
)
from .service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Scheduling"])


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db)


def get_availability_service(db: Session = Depends(get_db)) -> AvailabilityService:
    """Dependency injection for AvailabilityService"""
    return AvailabilityService(db)


def get_query_service(db: Session = Depends(get_db)) -> SchedulingQueryService:
    """Dependency injection for SchedulingQueryService"""
    return SchedulingQueryService(db)


@router.get("/health")
def health(db: Session = Depends(get_db)):
    """Report API status and database connectivity"""
    try:
        SchedulingRepository.ping(db)
    except SQLAlchemyError as e:
        logger.error(f"❌ Health check failed: {e}")
        return JSONResponse(
            status_code=500,
            content={
                "status": "error",
                "database": "disconnected",
                "erro": "Banco de dados indisponível",
            },
        )

    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected",
    }


@router.get("/servicos", response_model=list[ServiceResponse])
def list_services(service: SchedulingQueryService = Depends(get_query_service)):
    """List all services ordered by id"""
    return [ServiceResponse.model_validate(s) for s in service.list_services()]


@router.post("/agendar", status_code=201, response_model=BookingCreatedResponse)
def book_appointment(
    payload: Optional[BookingRequest] = None,
    service: BookingService = Depends(get_booking_service),
):
    """Create an appointment for a free slot"""
    appointment = service.book(payload or BookingRequest())
    return BookingCreatedResponse(
        id=appointment.id_agendamento,
        mensagem="Agendamento realizado com sucesso!",
        dados=BookingDetails(
            nome=appointment.nome,
            servico=appointment.servico,
            data=appointment.data_agendamento.isoformat(),
            hora=format_time(appointment.hora_agendamento),
            criado_em=appointment.data_criacao,
        ),
    )


@router.get("/disponibilidade", response_model=AvailabilityResponse)
def get_availability(
    data: Optional[str] = Query(None, description="Data no formato YYYY-MM-DD"),
    service: AvailabilityService = Depends(get_availability_service),
):
    """List occupied time slots for a date"""
    if not data:
        return JSONResponse(
            status_code=400,
            content={
                "erro": 'Parâmetro "data" é obrigatório',
                "exemplo": "/api/disponibilidade?data=2025-11-10",
            },
        )

    if not validate_date_format(data):
        return JSONResponse(
            status_code=400,
            content={"erro": "Data deve estar no formato YYYY-MM-DD", "recebido": data},
        )

    slots = [OccupiedSlot.model_validate(s) for s in service.occupied_slots(data)]
    return AvailabilityResponse(data=data, total_agendamentos=len(slots), horarios_ocupados=slots)


@router.get("/agendamentos", response_model=AppointmentListResponse)
def list_appointments(
    limite: int = Query(MAX_APPOINTMENTS, ge=1, description="Máximo de agendamentos (até 100)"),
    service: SchedulingQueryService = Depends(get_query_service),
):
    """List the most recent appointments"""
    appointments = [
        AppointmentResponse.model_validate(a) for a in service.list_recent_appointments(limite)
    ]
    return AppointmentListResponse(total=len(appointments), agendamentos=appointments)


@router.delete("/agendamentos/{appointment_id}", response_model=AppointmentDeletedResponse)
def delete_appointment(
    appointment_id: int,
    service: SchedulingQueryService = Depends(get_query_service),
):
    """Delete an appointment"""
    appointment = service.delete_by_id(appointment_id)
    return AppointmentDeletedResponse(
        mensagem="Agendamento excluído com sucesso",
        agendamento=AppointmentResponse.model_validate(appointment),
    )


__all__ = [
    "router",
    "health",
    "list_services",
    "book_appointment",
    "get_availability",
    "list_appointments",
    "delete_appointment",
]
