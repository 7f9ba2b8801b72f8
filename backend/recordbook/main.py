"""Recordbook API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RecordbookError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - One DatabaseSessionManager, SyncEngine and SchemaLab per process, built in
      the lifespan and stored on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Initial refresh failure is not fatal: the engine keeps the classified message
      in lastError (e.g. "run the init script") and the API stays up to serve it
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recordbook.api.error_handlers import register_error_handlers
from recordbook.api.routes import entities, health, lab, state
from recordbook.config import get_settings
from recordbook.core.domain_types import Locale
from recordbook.core.errors import RecordbookError
from recordbook.infrastructure.database import DatabaseSessionManager
from recordbook.infrastructure.observability import setup_logging
from recordbook.infrastructure.sql_gateway import SqlGateway
from recordbook.infrastructure.text_generation_client import TextGenerationClient
from recordbook.services.schema_lab import SchemaLab
from recordbook.services.sync_engine import SyncEngine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    locale = Locale(settings.locale)

    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.db_manager = db_manager
    app.state.engine = SyncEngine(SqlGateway(db_manager), locale)
    app.state.schema_lab = SchemaLab(
        TextGenerationClient(
            api_key=settings.anthropic_api_key,
            model=settings.generation_model,
            max_tokens=settings.generation_max_tokens,
            timeout_seconds=settings.anthropic_timeout_seconds,
        ),
        locale,
    )

    try:
        await app.state.engine.refresh()
    except RecordbookError as e:
        logger.warning(f"Initial refresh failed: {e.message}")
    logger.info("Recordbook API started")
    yield
    logger.info("Recordbook API shutting down")
    await db_manager.dispose()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Recordbook API", version="1.0.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health.router)
    app.include_router(state.router)
    app.include_router(entities.router)
    app.include_router(lab.router)
    register_error_handlers(app)
    return app


app = create_app()
