"""Sync Engine over SQLite: end-to-end behaviour with the real SQL gateway.

Invariants:
    - Created rows come back with store-assigned ids
    - Deleting a referenced user is a ReferentialConflictError
    - Missing tables classify as SchemaMissingError on refresh
"""

import pytest

from recordbook.core.domain_types import Locale
from recordbook.core.errors import ReferentialConflictError, SchemaMissingError
from recordbook.infrastructure.sql_gateway import SqlGateway
from recordbook.services.sync_engine import SyncEngine


@pytest.fixture
def sql_engine(sql_gateway):
    return SyncEngine(sql_gateway, Locale.RU)


async def test_create_user_gets_store_identity(sql_engine):
    await sql_engine.create(
        "users",
        {"name": "Иван Иванов", "email": "ivan@example.com", "role": "Viewer"},
    )

    [user] = sql_engine.snapshot.users
    assert user.id == 1
    assert user.name == "Иван Иванов"
    assert sql_engine.last_error is None
    assert sql_engine.store_connected is True


async def test_record_lifecycle(sql_engine):
    await sql_engine.create("users", {"name": "Анна", "email": "a@example.com"})
    await sql_engine.create("categories", {"name": "Работа", "description": "Задачи"})
    await sql_engine.create(
        "records",
        {"title": "План", "content": "Текст", "userId": 1, "categoryId": 1},
    )
    await sql_engine.update("records", 1, {"title": "План на неделю"})

    [record] = sql_engine.snapshot.records
    assert record.title == "План на неделю"
    assert record.user_id == 1
    assert record.created_at is not None

    await sql_engine.delete("records", 1)
    assert sql_engine.snapshot.records == ()


async def test_delete_referenced_user_is_referential_conflict(sql_engine):
    await sql_engine.create("users", {"name": "Анна", "email": "a@example.com"})
    await sql_engine.create(
        "records", {"title": "План", "content": "Текст", "userId": 1},
    )
    before = sql_engine.snapshot

    with pytest.raises(ReferentialConflictError):
        await sql_engine.delete("users", 1)

    assert sql_engine.snapshot is before
    assert len(sql_engine.snapshot.users) == 1


async def test_refresh_without_schema_is_schema_missing(empty_db_manager):
    engine = SyncEngine(SqlGateway(empty_db_manager), Locale.RU)

    with pytest.raises(SchemaMissingError):
        await engine.refresh()

    assert engine.last_error.startswith("БАЗА ДАННЫХ ПУСТА")
