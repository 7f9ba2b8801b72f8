"""Request Dependencies: hand the per-process collaborators to route handlers.

Invariants:
    - SyncEngine, SchemaLab and DatabaseSessionManager are created once by the
      lifespan and stored on app.state
    - Routes receive them only through these Depends() providers

Design Decisions:
    - app.state over module globals: tests build their own app state and the
      engine is never resolved through ambient lookup
"""

from fastapi import Request

from recordbook.infrastructure.database import DatabaseSessionManager
from recordbook.services.schema_lab import SchemaLab
from recordbook.services.sync_engine import SyncEngine


def get_engine(request: Request) -> SyncEngine:
    return request.app.state.engine


def get_schema_lab(request: Request) -> SchemaLab:
    return request.app.state.schema_lab


def get_db_manager(request: Request) -> DatabaseSessionManager | None:
    return getattr(request.app.state, "db_manager", None)
