"""FastAPI application entry point."""

import os
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

import structlog
from fastapi import APIRouter, FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wordjotter.config import configure_logging, get_settings
from wordjotter.database import dispose_engine, initialize_database
from wordjotter.domain.common.exceptions import DomainError
from wordjotter.exceptions import WordJotterError
from wordjotter.infrastructure.learning.routers import quick_notes, review, words

REQUEST_ID_HEADER = "X-Request-ID"

settings = get_settings()
configure_logging(settings.ENVIRONMENT)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the database on startup, dispose of it on shutdown."""
    initialize_database(settings)
    logger.info("application_started", environment=settings.ENVIRONMENT)
    yield
    dispose_engine()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_request_id_and_logging(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Tag every log line of a request with its id and log its timing."""
    # Prefer an incoming id so a client can correlate its own logs
    request_id = request.headers.get(REQUEST_ID_HEADER) or os.urandom(8).hex()
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)

    start = time.perf_counter()
    logger.info("http_request_start", method=request.method, path=request.url.path)
    response = await call_next(request)
    logger.info(
        "http_request_end",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=int((time.perf_counter() - start) * 1000),
    )
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


@app.exception_handler(WordJotterError)
async def wordjotter_error_handler(request: Request, exc: WordJotterError) -> JSONResponse:
    """Translate application errors to their HTTP status."""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("request_failed", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate domain rule violations to 400 responses."""
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


api_router = APIRouter(prefix=settings.API_V1_PREFIX)
api_router.include_router(words.router)
api_router.include_router(review.router)
api_router.include_router(quick_notes.router)
app.include_router(api_router)


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
