"""Scheduling domain errors - closed set of failure kinds exposed to clients"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    MISSING_FIELDS = "MissingFields"
    INVALID_NAME = "InvalidName"
    INVALID_PHONE = "InvalidPhone"
    INVALID_DATE_FORMAT = "InvalidDateFormat"
    INVALID_TIME_FORMAT = "InvalidTimeFormat"
    UNKNOWN_SERVICE = "UnknownService"
    SLOT_CONFLICT = "SlotConflict"
    NOT_FOUND = "NotFound"
    STORAGE_UNAVAILABLE = "StorageUnavailable"


class SchedulingError(Exception):
    """
    Base class for errors translated into JSON responses.

    ``message`` is safe to show to callers; raw store diagnostics only go to logs.
    """

    status_code = 500

    def __init__(self, kind: ErrorKind, message: str, extra: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.extra = extra or {}

    def to_payload(self) -> dict[str, Any]:
        return {"sucesso": False, "erro": self.message, "tipo": self.kind.value, **self.extra}


class BookingValidationError(SchedulingError):
    status_code = 400


class SlotConflict(SchedulingError):
    status_code = 409

    def __init__(self, data: str, hora: str):
        super().__init__(
            ErrorKind.SLOT_CONFLICT,
            "Horário indisponível para a data escolhida",
            {"data": data, "hora": hora},
        )


class AppointmentNotFound(SchedulingError):
    status_code = 404

    def __init__(self, appointment_id: int):
        super().__init__(ErrorKind.NOT_FOUND, "Agendamento não encontrado")
        self.appointment_id = appointment_id


class StorageUnavailable(SchedulingError):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(ErrorKind.STORAGE_UNAVAILABLE, message)
