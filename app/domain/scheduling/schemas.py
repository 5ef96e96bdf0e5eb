"""Scheduling domain schemas - Pydantic models for requests and responses"""

from datetime import date, datetime, time
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_serializer

from ...shared.validators import format_time


class BookingRequest(BaseModel):
    """
    Raw booking form body.

    Every field is optional so that missing values reach the validation layer
    and are reported together instead of failing request parsing.
    """

    # The booking page may send the service id as a number
    model_config = ConfigDict(coerce_numbers_to_str=True)

    nome: Optional[str] = None
    telefone: Optional[str] = None
    servico: Optional[str] = None
    data: Optional[str] = None
    hora: Optional[str] = None


class NormalizedBooking(BaseModel):
    """Booking request that passed validation, all strings trimmed"""

    model_config = ConfigDict(frozen=True)

    nome: str
    telefone: str
    servico: str
    data: str
    hora: time


class ServiceResponse(BaseModel):
    id_servico: int
    nome_servico: str

    model_config = ConfigDict(from_attributes=True)


class OccupiedSlot(BaseModel):
    hora_agendamento: time
    nome: str
    servico: str

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("hora_agendamento")
    def serialize_hora(self, value: time) -> str:
        return format_time(value)


class AvailabilityResponse(BaseModel):
    data: str
    total_agendamentos: int
    horarios_ocupados: list[OccupiedSlot]


class AppointmentResponse(BaseModel):
    id_agendamento: int
    nome: str
    telefone: str
    servico: str
    data_agendamento: date
    hora_agendamento: time
    data_criacao: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("hora_agendamento")
    def serialize_hora(self, value: time) -> str:
        return format_time(value)


class AppointmentListResponse(BaseModel):
    total: int
    agendamentos: list[AppointmentResponse]


class BookingDetails(BaseModel):
    nome: str
    servico: str
    data: str
    hora: str
    criado_em: Optional[datetime] = None


class BookingCreatedResponse(BaseModel):
    sucesso: bool = True
    id: int
    mensagem: str
    dados: BookingDetails


class AppointmentDeletedResponse(BaseModel):
    sucesso: bool = True
    mensagem: str
    agendamento: AppointmentResponse
