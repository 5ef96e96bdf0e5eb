from sqlalchemy import Column, Date, DateTime, Integer, String, Time, UniqueConstraint
from sqlalchemy.sql import func

from .config import DB_SCHEMA
from .database import Base

SLOT_CONSTRAINT_NAME = "uq_agendamento_slot"


class Service(Base):
    """Bookable salon service. Managed by admin tooling, read-only here."""

    __tablename__ = "tb_servico"
    __table_args__ = {"schema": DB_SCHEMA}

    id_servico = Column(Integer, primary_key=True, index=True)
    nome_servico = Column(String(100), nullable=False)


class Appointment(Base):
    __tablename__ = "tb_agendamento"

    id_agendamento = Column(Integer, primary_key=True, index=True)
    nome = Column(String(255), nullable=False)
    telefone = Column(String(30), nullable=False)
    # Canonical service name; checked at booking time, no FK / cascade
    servico = Column(String(100), nullable=False)
    data_agendamento = Column(Date, nullable=False, index=True)
    hora_agendamento = Column(Time, nullable=False)
    data_criacao = Column(DateTime, server_default=func.now(), nullable=False)

    # One appointment per (date, time) slot
    __table_args__ = (
        UniqueConstraint("data_agendamento", "hora_agendamento", name=SLOT_CONSTRAINT_NAME),
        {"schema": DB_SCHEMA},
    )
    # Fetch id and data_criacao in the INSERT itself
    __mapper_args__ = {"eager_defaults": True}
