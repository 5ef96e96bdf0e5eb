import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Local runs fall back to a SQLite file; production points this at PostgreSQL
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./agenda.db")

# PostgreSQL schema holding tb_servico / tb_agendamento (e.g. "pi2"); unset = default schema
DB_SCHEMA = os.getenv("DB_SCHEMA") or None

# libpq sslmode for managed Postgres hosts ("require" skips certificate verification)
DB_SSLMODE = os.getenv("DB_SSLMODE") or None

# HTTP server
PORT = int(os.getenv("PORT", "3000"))
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# CORS - the public booking page is served from a different origin
ALLOWED_ORIGINS = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",") if o.strip()]

API_TITLE = "Studio Adriana Soares API"
API_VERSION = "1.0.0"
