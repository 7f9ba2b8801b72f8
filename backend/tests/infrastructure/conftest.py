"""Infrastructure fixtures: file-backed SQLite store per test.

Invariants:
    - Every test gets its own database file under tmp_path
    - db_manager has the schema created; empty_db_manager does not

Design Decisions:
    - File-backed over :memory:: refresh runs three selects concurrently and an
      in-memory SQLite database is private to a single connection
"""

import pytest

from recordbook.infrastructure.database import DatabaseSessionManager
from recordbook.infrastructure.sql_gateway import SqlGateway


@pytest.fixture
async def empty_db_manager(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")
    yield manager
    await manager.dispose()


@pytest.fixture
async def db_manager(empty_db_manager):
    await empty_db_manager.create_schema()
    return empty_db_manager


@pytest.fixture
def sql_gateway(db_manager):
    return SqlGateway(db_manager)
