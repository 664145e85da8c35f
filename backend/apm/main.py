"""APM Inventory API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the {error, message, code} envelope
    - CORS configured from settings (not hardcoded)
    - Database and services built on startup via lifespan; disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - ServiceContainer lives on app.state, not in module globals
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from apm.api.error_handlers import register_error_handlers
from apm.api.routes import auth, health
from apm.api.routes.collections import build_api_router
from apm.config import get_settings
from apm.infrastructure.database import DatabaseSessionManager
from apm.infrastructure.observability import setup_logging
from apm.services.registry import bootstrap_admin, build_services

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database = DatabaseSessionManager.from_url(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_recycle=settings.database_pool_recycle_seconds,
    )
    services = build_services(database, settings)
    app.state.services = services
    await bootstrap_admin(services, settings)
    logger.info("APM Inventory API started")
    yield
    logger.info("APM Inventory API shutting down")
    await database.dispose()


app = FastAPI(
    title="APM Inventory API", version="1.0.0", lifespan=lifespan,
)

# CORS: configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """One access-log line per request."""
    started = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


# Routes: explicit registration
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(build_api_router())

register_error_handlers(app)
