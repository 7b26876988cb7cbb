"""FastAPI application entry point and configuration."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from memoize.config import configure_logging, get_settings
from memoize.core import configure_container
from memoize.database import create_tables, dispose_engine, initialize_database
from memoize.exceptions import MemoizeError
from memoize.infrastructure.identity.routers import me
from memoize.infrastructure.study.routers import cards, deck_cards, decks

settings = get_settings()
configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)
configure_container(settings)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create tables on startup and release the engine on shutdown."""
    initialize_database(settings)
    create_tables()
    logger.info(
        "application_started",
        environment=settings.ENVIRONMENT,
        record_store_backend=settings.RECORD_STORE_BACKEND,
    )
    yield
    dispose_engine()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Flashcard deck and card storage with per-owner access",
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(MemoizeError)
async def memoize_error_handler(request: Request, exc: MemoizeError) -> JSONResponse:
    """Render MemoizeError subclasses with their status code."""
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, status_code=exc.status_code)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.include_router(decks.router, prefix=settings.API_V1_PREFIX)
app.include_router(deck_cards.router, prefix=settings.API_V1_PREFIX)
app.include_router(cards.router, prefix=settings.API_V1_PREFIX)
app.include_router(me.router, prefix=settings.API_V1_PREFIX)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Report that the service is up."""
    return {"status": "ok"}
