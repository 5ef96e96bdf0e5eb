"""Booking request validation - pure checks, no database access"""

from ...shared.validators import is_blank, parse_time, validate_date_format
from .exceptions import BookingValidationError, ErrorKind
from .schemas import BookingRequest, NormalizedBooking

REQUIRED_FIELDS = ("nome", "telefone", "servico", "data", "hora")
MIN_NAME_LENGTH = 3
MIN_PHONE_LENGTH = 10


def validate_booking(request: BookingRequest) -> NormalizedBooking:
    """
    Validate a raw booking request and return its normalized form.

    Checks run in order and stop at the first failure: required fields,
    name length, phone length, date shape, time of day.

    Raises:
        BookingValidationError: tagged with the ErrorKind of the failed check
    """
    received = {field: not is_blank(getattr(request, field)) for field in REQUIRED_FIELDS}
    missing = [field for field, present in received.items() if not present]
    if missing:
        raise BookingValidationError(
            ErrorKind.MISSING_FIELDS,
            f"Todos os campos são obrigatórios. Ausentes: {', '.join(missing)}",
            {"campos_recebidos": received, "campos_ausentes": missing},
        )

    nome = request.nome.strip()
    telefone = request.telefone.strip()
    servico = request.servico.strip()
    data = request.data.strip()
    hora = request.hora.strip()

    if len(nome) < MIN_NAME_LENGTH:
        raise BookingValidationError(
            ErrorKind.INVALID_NAME, f"Nome deve ter pelo menos {MIN_NAME_LENGTH} caracteres"
        )

    if len(telefone) < MIN_PHONE_LENGTH:
        raise BookingValidationError(ErrorKind.INVALID_PHONE, "Telefone inválido")

    if not validate_date_format(data):
        raise BookingValidationError(
            ErrorKind.INVALID_DATE_FORMAT,
            "Data deve estar no formato YYYY-MM-DD",
            {"recebido": data},
        )

    parsed_hora = parse_time(hora)
    if parsed_hora is None:
        raise BookingValidationError(
            ErrorKind.INVALID_TIME_FORMAT,
            "Hora deve estar no formato HH:MM",
            {"recebido": hora},
        )

    return NormalizedBooking(
        nome=nome, telefone=telefone, servico=servico, data=data, hora=parsed_hora
    )
