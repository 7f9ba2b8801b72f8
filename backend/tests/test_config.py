"""Settings: verifies environment parsing."""

import pytest
from pydantic import ValidationError

from recordbook.config import Settings


def test_postgres_url_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_sqlite_url_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///test.db")
    assert settings.database_url == "sqlite+aiosqlite:///test.db"


def test_locale_restricted():
    assert Settings(locale="en").locale == "en"
    with pytest.raises(ValidationError):
        Settings(locale="de")
