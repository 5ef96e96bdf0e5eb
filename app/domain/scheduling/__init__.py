"""
Scheduling Domain

Services catalogue, appointment booking and availability for the salon.

Structure:
- schemas.py       # Booking request, normalized booking and response models
- validation.py    # Pure checks on booking requests
- repository.py    # Service / appointment database queries
- availability.py  # Occupied slots for a date
- service.py       # Booking workflow (validate, check slot, insert)
- queries.py       # Listings and appointment deletion
- exceptions.py    # Error kinds returned to clients
- router.py        # /api endpoints

Double-booking is prevented by the uq_agendamento_slot constraint on
(data_agendamento, hora_agendamento); the locking read in the booking
transaction only turns the common case into an early 409.
"""

from .router import router

__all__ = ["router"]
