"""Schema Lab: verifies prompt content, fence stripping, placeholders and fallbacks.

Invariants:
    - SQL output has every fence removed
    - Documentation keeps inner fences, loses a wrapping one
    - Empty output -> locale placeholder; failed call -> error text, never raises
"""

from recordbook.core.domain_types import Locale
from recordbook.core.errors import TextGenerationError
from recordbook.services.schema_lab import SchemaLab, build_sql_prompt, describe_tables
from tests.services.mock_text_generator import MockTextGenerator


def test_describe_tables_lists_schema():
    text = describe_tables()
    assert "users (id SERIAL PRIMARY KEY" in text
    assert "user_id INTEGER REFERENCES users(id)" in text
    assert "created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW()" in text


def test_sql_prompt_requests_remedies():
    prompt = build_sql_prompt(Locale.RU)
    assert "ON DELETE CASCADE" in prompt
    assert "DISABLE ROW LEVEL SECURITY" in prompt
    assert "Russian" in prompt


async def test_sql_script_strips_fences():
    generator = MockTextGenerator(["```sql\nCREATE TABLE users();\n```"])
    lab = SchemaLab(generator, Locale.RU)

    assert await lab.generate_sql_script() == "CREATE TABLE users();"
    assert "ON DELETE CASCADE" in generator.prompts[0]


async def test_sql_script_empty_response_placeholder():
    lab = SchemaLab(MockTextGenerator([""]), Locale.RU)
    assert await lab.generate_sql_script() == "-- Нет ответа от модели"


async def test_sql_script_failure_becomes_comment():
    lab = SchemaLab(
        MockTextGenerator([TextGenerationError("503 overloaded", "http_status")]),
        Locale.EN,
    )

    script = await lab.generate_sql_script()

    assert script.startswith("-- Text generation call failed:")
    assert "503 overloaded" in script


async def test_documentation_keeps_inner_fences():
    doc = "# Docs\n\n```sql\nSELECT 1;\n```"
    lab = SchemaLab(MockTextGenerator([f"```markdown\n{doc}\n```"]), Locale.RU)

    assert await lab.generate_documentation() == doc


async def test_documentation_empty_and_failure():
    lab = SchemaLab(
        MockTextGenerator(["   ", TextGenerationError("boom", "timeout")]),
        Locale.RU,
    )

    assert await lab.generate_documentation() == "# Документация\n\nНет ответа от модели."
    failed = await lab.generate_documentation()
    assert failed.startswith("# Ошибка")
    assert "boom" in failed
