"""Schema Lab: asks the text-generation collaborator for the init script and docs.

Invariants:
    - generate_sql_script() returns raw SQL: every code fence removed, trimmed
    - generate_documentation() returns Markdown: only a wrapping fence removed
    - Empty model output is replaced by a fixed locale-specific placeholder
    - A failed generation call never raises: the caller gets a SQL comment /
      Markdown document carrying the error text (the lab UI shows it verbatim)

Design Decisions:
    - Prompts built from the ORM metadata so the requested DDL always matches the
      tables the gateway queries
    - The generated script asks for ON DELETE CASCADE and disabled row-level
      security: it is the remedy users are pointed to by the SchemaMissing,
      AccessDenied and ReferentialConflict messages
"""

import logging

from sqlalchemy.dialects import postgresql

from recordbook.core.clean_generated_text import strip_all_fences, strip_outer_fence
from recordbook.core.domain_types import Locale
from recordbook.core.errors import TextGenerationError
from recordbook.core.gateway_protocols import TextGenerator
from recordbook.core.language_strings import get_string
from recordbook.db.base import Base
import recordbook.models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


def describe_tables() -> str:
    """One line per table: name(column TYPE, ...), in creation order."""
    lines = []
    for i, table in enumerate(Base.metadata.sorted_tables, start=1):
        cols = []
        for col in table.columns:
            spec = f"{col.name} {col.type.compile(dialect=postgresql.dialect())}"
            if col.primary_key:
                spec = f"{col.name} SERIAL PRIMARY KEY"
            for fk in col.foreign_keys:
                target_table, target_col = fk.target_fullname.split(".")
                spec += f" REFERENCES {target_table}({target_col})"
            if col.server_default is not None:
                spec += " DEFAULT NOW()"
            cols.append(spec)
        lines.append(f"{i}. {table.name} ({', '.join(cols)})")
    return "\n".join(lines)


def build_sql_prompt(locale: Locale) -> str:
    language = get_string("output_language", locale)
    return f"""
You are a PostgreSQL expert.

Task: generate the initialization script for the database of an educational
record-keeping application.

Required tables:
{describe_tables()}

REQUIREMENT 1: add ON DELETE CASCADE to the foreign keys (records.user_id and
records.category_id) so that deleting a user or category never fails with a
foreign key constraint error.

REQUIREMENT 2: for every table add "ALTER TABLE ... DISABLE ROW LEVEL SECURITY;".
Row-level security blocks INSERT/UPDATE/DELETE for anonymous clients, and the
application must work without custom policies.

Naming: the application uses camelCase (userId) but PostgreSQL columns are
snake_case (user_id).

Produce a single script, in this order:
1. A comment saying: run this script to fix "violates row-level security policy".
2. DROP TABLE IF EXISTS ... CASCADE;
3. CREATE TABLE ...
4. ALTER TABLE ... DISABLE ROW LEVEL SECURITY;
5. INSERT sample rows.

Output ONLY plain SQL without markdown fences. Write the comments in {language}.
"""


def build_docs_prompt(locale: Locale) -> str:
    language = get_string("output_language", locale)
    return f"""
You are a technical writer. Write the documentation of the "Recordbook" system
in {language}, formatted as Markdown with tables.

# System documentation

## 1. Architecture
The backend talks to a PostgreSQL database through an async SQL gateway. Every
write is validated locally, sent to the store, and followed by a full reload of
users, categories and records.

## 2. Database structure
Describe each table with a | Field | Type | Description | table, using the
snake_case column names. Mention the foreign keys of records (user_id, category_id).
Tables:
{describe_tables()}

## 3. Operating modes
Online mode: requests go straight to the database.
Offline mode (test): when the connectivity toggle is off, the application refuses
every INSERT/UPDATE/DELETE with an error even though the network is available.
Reads still reach the database.

## 4. Troubleshooting
* "violates row-level security policy": the database has protection enabled
  without policies. Generate the script in the SQL Lab and run it; it disables RLS.
* Foreign key error on delete: the entry is still used by other tables. Recreate
  the schema with ON DELETE CASCADE.
* "relation does not exist" (42P01): the tables were never created. Run the script.

Write clearly and professionally.
"""


class SchemaLab:
    """SQL Lab backend: init script and documentation generation."""

    def __init__(self, generator: TextGenerator, locale: Locale = Locale.RU):
        self._generator = generator
        self._locale = locale

    async def generate_sql_script(self) -> str:
        try:
            text = await self._generator.generate(build_sql_prompt(self._locale))
        except TextGenerationError as e:
            logger.error(
                f"SQL script generation failed: {e.message}",
                extra={"error_code": e.code},
            )
            return get_string("sql_failed", self._locale, detail=e.message)
        return strip_all_fences(text) or get_string("sql_placeholder", self._locale)

    async def generate_documentation(self) -> str:
        try:
            text = await self._generator.generate(build_docs_prompt(self._locale))
        except TextGenerationError as e:
            logger.error(
                f"Documentation generation failed: {e.message}",
                extra={"error_code": e.code},
            )
            return get_string("docs_failed", self._locale, detail=e.message)
        return strip_outer_fence(text) or get_string("docs_placeholder", self._locale)
