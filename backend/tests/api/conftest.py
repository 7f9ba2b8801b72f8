"""API test fixtures: app state wired to fakes + httpx ASGI client.

Invariants:
    - Lifespan is not run: app.state is populated directly with a SyncEngine over
      FakeGateway and a SchemaLab over MockTextGenerator
    - No db_manager: readiness reports the store unavailable
"""

import pytest
from httpx import ASGITransport, AsyncClient

from recordbook.core.domain_types import Locale
from recordbook.main import app
from recordbook.services.schema_lab import SchemaLab
from recordbook.services.sync_engine import SyncEngine
from tests.services.fake_gateway import FakeGateway
from tests.services.mock_text_generator import MockTextGenerator


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def text_generator():
    return MockTextGenerator(["```sql\nCREATE TABLE users();\n```", "# Docs"])


@pytest.fixture
async def client(gateway, text_generator):
    app.state.engine = SyncEngine(gateway, Locale.RU)
    app.state.schema_lab = SchemaLab(text_generator, Locale.RU)
    app.state.db_manager = None

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    for name in ("engine", "schema_lab", "db_manager"):
        delattr(app.state, name)
