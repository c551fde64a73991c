"""User Service API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UserServiceError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Store client created on startup and closed on shutdown via lifespan
    - Importing this module never reads configuration; create_app() does
    - Missing MONGOURI fails startup (ConfigurationError) before any request is served

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory, served with uvicorn factory=True: settings are resolved
      once at startup and shared with the lifespan through app.state
    - Error handlers extracted to api/error_handlers.py (ADR: keep main.py wiring-only)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_service.api.error_handlers import register_error_handlers
from user_service.api.routes import health, users
from user_service.config import Settings, load_settings
from user_service.infrastructure.database import close_db, init_db
from user_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.mongo_uri,
        settings.mongo_database,
        settings.mongo_collection,
        timeout_ms=settings.store_timeout_ms,
    )
    logger.info("User service API started")
    yield
    logger.info("User service API shutting down")
    close_db()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application. Raises ConfigurationError if MONGOURI is missing."""
    settings = settings or load_settings()

    app = FastAPI(
        title="User Service API", version="1.0.0", lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


def run() -> None:
    """Console entry point — validate configuration, then serve with uvicorn."""
    import uvicorn

    settings = load_settings()
    uvicorn.run(
        "user_service.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
