"""
Tests for booking request validation and the shared validators.
"""

from datetime import time

import pytest

from app.domain.scheduling.exceptions import BookingValidationError, ErrorKind
from app.domain.scheduling.schemas import BookingRequest
from app.domain.scheduling.validation import validate_booking
from app.shared.validators import format_time, parse_time, validate_date_format


def test_valid_request_is_trimmed(make_request):
    """Every string is trimmed and the time parsed."""
    booking = validate_booking(
        make_request(nome="  Ana Silva ", telefone=" 11999990000 ", servico=" Corte ", hora=" 14:00 ")
    )

    assert booking.nome == "Ana Silva"
    assert booking.telefone == "11999990000"
    assert booking.servico == "Corte"
    assert booking.data == "2025-11-10"
    assert booking.hora == time(14, 0)


def test_missing_fields_are_all_reported():
    """Missing and blank fields are listed together."""
    with pytest.raises(BookingValidationError) as exc_info:
        validate_booking(BookingRequest(nome="Ana Silva", telefone="   ", data="2025-11-10"))

    error = exc_info.value
    assert error.kind == ErrorKind.MISSING_FIELDS
    assert error.extra["campos_ausentes"] == ["telefone", "servico", "hora"]
    assert error.extra["campos_recebidos"]["nome"] is True
    assert "hora" in error.message


def test_missing_fields_checked_before_name(make_request):
    """A short name does not hide a missing field."""
    with pytest.raises(BookingValidationError) as exc_info:
        validate_booking(make_request(nome="Al", hora=None))

    assert exc_info.value.kind == ErrorKind.MISSING_FIELDS


def test_short_name_rejected(make_request):
    with pytest.raises(BookingValidationError) as exc_info:
        validate_booking(make_request(nome=" Al  "))

    assert exc_info.value.kind == ErrorKind.INVALID_NAME
    assert exc_info.value.status_code == 400


def test_short_phone_rejected(make_request):
    with pytest.raises(BookingValidationError) as exc_info:
        validate_booking(make_request(telefone=" 119999000 "))

    assert exc_info.value.kind == ErrorKind.INVALID_PHONE


def test_name_checked_before_phone(make_request):
    with pytest.raises(BookingValidationError) as exc_info:
        validate_booking(make_request(nome="Al", telefone="123"))

    assert exc_info.value.kind == ErrorKind.INVALID_NAME


@pytest.mark.parametrize("data", ["2025/11/10", "10-11-2025", "2025-1-10", "hoje"])
def test_malformed_date_rejected(make_request, data):
    with pytest.raises(BookingValidationError) as exc_info:
        validate_booking(make_request(data=data))

    assert exc_info.value.kind == ErrorKind.INVALID_DATE_FORMAT
    assert exc_info.value.extra["recebido"] == data


def test_calendar_validity_not_checked(make_request):
    """Only the date shape is validated."""
    booking = validate_booking(make_request(data="2025-02-30"))

    assert booking.data == "2025-02-30"


@pytest.mark.parametrize("hora", ["25:00", "14h00", "1400", "14:60"])
def test_malformed_time_rejected(make_request, hora):
    with pytest.raises(BookingValidationError) as exc_info:
        validate_booking(make_request(hora=hora))

    assert exc_info.value.kind == ErrorKind.INVALID_TIME_FORMAT


def test_numeric_service_id_accepted_as_string():
    request = BookingRequest(
        nome="Ana Silva", telefone="11999990000", servico=2, data="2025-11-10", hora="09:30"
    )

    assert validate_booking(request).servico == "2"


def test_parse_time_accepts_seconds():
    assert parse_time("08:15:30") == time(8, 15, 30)
    assert parse_time("") is None


def test_format_time_drops_zero_seconds():
    assert format_time(time(14, 0)) == "14:00"
    assert format_time(time(14, 0, 5)) == "14:00:05"


def test_validate_date_format():
    assert validate_date_format("2025-11-10")
    assert not validate_date_format("2025/11/10")
    assert not validate_date_format(None)


@pytest.mark.parametrize(
    "data",
    ["2025-11-10\n", "２０２５-１１-１０", "2025-11-10T00:00", " 2025-11-10", "٢٠٢٥-١١-١٠"],
)
def test_date_format_is_ascii_and_whole_string(data):
    """Trailing newlines and non-ASCII digits are not accepted as dates."""
    assert not validate_date_format(data)


@pytest.mark.parametrize("data", ["２０２５-１１-１０", "2025-11-10\n2025"])
def test_booking_rejects_non_ascii_or_multiline_date(make_request, data):
    with pytest.raises(BookingValidationError) as exc_info:
        validate_booking(make_request(data=data))

    assert exc_info.value.kind == ErrorKind.INVALID_DATE_FORMAT


@pytest.mark.parametrize("hora", ["１４:００", "14:00\n15:00", "14:00:0"])
def test_booking_rejects_non_ascii_or_partial_time(make_request, hora):
    with pytest.raises(BookingValidationError) as exc_info:
        validate_booking(make_request(hora=hora))

    assert exc_info.value.kind == ErrorKind.INVALID_TIME_FORMAT
