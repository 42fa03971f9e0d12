"""webae API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WebaeError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py; main only wires them
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from webae import __version__
from webae.api.error_handlers import register_error_handlers
from webae.api.routes import health, metadata
from webae.config import get_settings
from webae.infrastructure.database import close_db, init_db
from webae.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("webae API started")
    yield
    await close_db()
    logger.info("webae API shutting down")


app = FastAPI(
    title="webae API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[
        "Location",
        f"X-{settings.application_name}-alert",
        f"X-{settings.application_name}-error",
        f"X-{settings.application_name}-params",
    ],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(metadata.router)

register_error_handlers(app)
