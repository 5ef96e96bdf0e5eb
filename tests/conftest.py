"""
Shared fixtures: a throwaway SQLite database seeded with services.
"""

import os
import tempfile

import pytest

# Must be set before app.config is imported
_DB_DIR = tempfile.mkdtemp(prefix="agenda-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'agenda.db')}"
os.environ.pop("DB_SCHEMA", None)

from fastapi.testclient import TestClient  # noqa: E402

from app.database import Base, SessionLocal, engine  # noqa: E402
from app.domain.scheduling.schemas import BookingRequest  # noqa: E402
from app.main import app  # noqa: E402
from app.models import Service  # noqa: E402

# Inserted out of id order on purpose
SEED_SERVICES = [(3, "Pedicure"), (1, "Corte"), (2, "Escova")]


@pytest.fixture(autouse=True)
def database():
    """Fresh schema and service catalogue for every test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        for service_id, name in SEED_SERVICES:
            db.add(Service(id_servico=service_id, nome_servico=name))
        db.commit()
    finally:
        db.close()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


BOOKING_FIELDS = {
    "nome": "Ana Silva",
    "telefone": "11999990000",
    "servico": "Corte",
    "data": "2025-11-10",
    "hora": "14:00",
}


@pytest.fixture
def make_request():
    """Factory for booking requests, valid unless overridden."""

    def _make(**overrides) -> BookingRequest:
        return BookingRequest(**{**BOOKING_FIELDS, **overrides})

    return _make


@pytest.fixture
def booking_body():
    return dict(BOOKING_FIELDS)
