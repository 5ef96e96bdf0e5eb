import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import models  # noqa: F401
from .config import ALLOWED_ORIGINS, API_TITLE, API_VERSION, LOG_LEVEL
from .database import Base, SessionLocal, engine
from .domain.scheduling import router as scheduling_router
from .domain.scheduling.exceptions import SchedulingError
from .domain.scheduling.repository import SchedulingRepository

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)


def check_database() -> None:
    """Create missing tables and make sure the database answers; raises on failure"""
    Base.metadata.create_all(bind=engine, checkfirst=True)
    db = SessionLocal()
    try:
        now = SchedulingRepository.ping(db)
    finally:
        db.close()
    logger.info(f"✅ Connected to database: {now}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    try:
        check_database()
    except Exception as e:
        # Serving without a database would only produce 500s
        logger.error(f"❌ Failed to connect to database: {e}")
        raise

    yield
    logger.info("Application shutting down...")


app = FastAPI(title=API_TITLE, version=API_VERSION, lifespan=lifespan)


@app.exception_handler(SchedulingError)
async def scheduling_exception_handler(request: Request, exc: SchedulingError):
    """Translate domain errors into the API's JSON error body"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} - {exc.kind.value}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON bodies and path/query params are client errors (400)"""
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={
            "sucesso": False,
            "erro": "Requisição inválida",
            "detalhes": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Unknown routes answer with the requested url and method"""
    if exc.status_code == 404:
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        return JSONResponse(
            status_code=404,
            content={"erro": "Rota não encontrada", "url": url, "metodo": request.method},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"{request.method} {request.url.path} - Error: {str(e)}")
        raise


# The booking page is a static site; no cookies are exchanged
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Routes
app.include_router(scheduling_router)


@app.get("/")
def root():
    return {
        "mensagem": "💅 API Studio Adriana Soares",
        "versao": API_VERSION,
        "status": "online",
        "endpoints": [
            "GET    /api/servicos - Lista todos os serviços",
            "POST   /api/agendar - Cria novo agendamento",
            "GET    /api/disponibilidade?data=YYYY-MM-DD - Horários ocupados",
            "GET    /api/agendamentos - Últimos agendamentos",
            "DELETE /api/agendamentos/{id} - Exclui um agendamento",
            "GET    /api/health - Status da API",
        ],
    }
