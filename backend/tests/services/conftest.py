"""Service test fixtures: fake gateway and a Sync Engine wired to it.

Invariants:
    - Every test gets a fresh FakeGateway and SyncEngine (no shared state)
    - seeded_engine has one user, one category and one record, already refreshed
"""

import pytest

from recordbook.core.domain_types import Locale
from recordbook.services.sync_engine import SyncEngine
from tests.services.fake_gateway import FakeGateway


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def engine(gateway):
    return SyncEngine(gateway, Locale.RU)


@pytest.fixture
async def seeded_engine(gateway, engine):
    gateway.seed("users", name="Анна", email="anna@example.com", role="Admin")
    gateway.seed("categories", name="Заметки", description="Общие заметки")
    gateway.seed(
        "records", title="Первая запись", content="Текст",
        user_id=1, category_id=1,
    )
    await engine.refresh()
    gateway.calls.clear()
    return engine
