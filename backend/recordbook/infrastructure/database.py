"""Database Session Manager: async engine, sessions with rollback, schema creation.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Every SQLAlchemy/driver exception is re-raised as GatewayError with a
      PostgreSQL SQLSTATE when one can be recovered
    - SQLite connections enforce foreign keys (PRAGMA foreign_keys=ON), so
      referential conflicts behave like PostgreSQL
    - Connection pool uses pool_pre_ping for stale connection detection

Design Decisions:
    - Manager instance owned by the FastAPI lifespan and stored on app.state:
      no module-level singleton
    - expire_on_commit=False: prevents lazy-load issues in async context
    - SQLite error names/messages mapped onto SQLSTATE so classification rules
      stay backend-agnostic
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from recordbook.core.gateway_protocols import GatewayError
from recordbook.db.base import Base
import recordbook.models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)

_SQLITE_ERROR_NAMES: dict[str, str] = {
    "SQLITE_CONSTRAINT_FOREIGNKEY": "23503",
    "SQLITE_CONSTRAINT_NOTNULL": "23502",
    "SQLITE_CONSTRAINT_UNIQUE": "23505",
}

_SQLITE_MESSAGES: tuple[tuple[str, str], ...] = (
    ("FOREIGN KEY constraint failed", "23503"),
    ("NOT NULL constraint failed", "23502"),
    ("no such table", "42P01"),
)


def extract_sqlstate(exc: DBAPIError) -> str | None:
    """Recover a SQLSTATE from a wrapped driver exception."""
    orig = exc.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        code = getattr(candidate, "sqlstate", None) or getattr(candidate, "pgcode", None)
        if code:
            return str(code)
    name = getattr(orig, "sqlite_errorname", None)
    if name in _SQLITE_ERROR_NAMES:
        return _SQLITE_ERROR_NAMES[name]
    message = str(orig)
    for fragment, code in _SQLITE_MESSAGES:
        if fragment in message:
            return code
    return None


def to_gateway_error(exc: BaseException) -> GatewayError:
    """Map a SQLAlchemy or transport exception to GatewayError."""
    if isinstance(exc, DBAPIError):
        message = str(exc.orig) if exc.orig is not None else str(exc)
        if isinstance(exc, IntegrityError):
            fallback = "INTEGRITY_ERROR"
        elif isinstance(exc, OperationalError):
            fallback = "OPERATIONAL_ERROR"
        else:
            fallback = "DRIVER_ERROR"
        return GatewayError(extract_sqlstate(exc) or fallback, message)
    if isinstance(exc, SQLAlchemyError):
        return GatewayError("SQLALCHEMY_ERROR", str(exc))
    return GatewayError("NETWORK_ERROR", str(exc) or exc.__class__.__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        is_sqlite = database_url.startswith("sqlite")
        pool_kwargs = {} if is_sqlite else {
            "pool_size": pool_size,
            "max_overflow": max_overflow,
            "pool_recycle": 3600,
        }
        self.engine = create_async_engine(
            database_url, pool_pre_ping=True, **pool_kwargs,
        )
        if is_sqlite:
            event.listen(
                self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys,
            )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback; failures leave as GatewayError."""
        session = self._session_factory()
        try:
            yield session
        except (SQLAlchemyError, OSError) as e:
            await _safe_rollback(session)
            err = to_gateway_error(e)
            logger.error(
                f"DB error: {err.message}", extra={"backend_code": err.code},
            )
            raise err from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except GatewayError as e:
            logger.error(f"DB health check failed: {e.message}")
            return False

    async def create_schema(self) -> None:
        """Create users/categories/records if missing (local runs and tests)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def _safe_rollback(session: AsyncSession) -> None:
    try:
        await session.rollback()
    except (SQLAlchemyError, OSError) as e:
        # Connection already gone; the original failure is what matters.
        logger.warning(f"Rollback failed: {e}")
