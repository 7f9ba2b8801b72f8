"""Entry Validation: verifies field rules per entity kind.

Tests:
    - Each rejection rule with its exact reason
    - Corrected inputs accept
    - partial=True checks supplied fields only
    - Unknown kinds pass through
"""

import pytest

from recordbook.core.domain_types import EntityKind, Locale
from recordbook.core.validate_entry import validate_entry


@pytest.mark.parametrize("kind, fields, reason", [
    ("users", {"name": "A", "email": "x@y.com"},
     "Имя должно содержать минимум 2 символа."),
    ("users", {"name": "Ann", "email": "no-at-sign"},
     "Некорректный адрес электронной почты."),
    ("users", {"name": "Ann"}, "Некорректный адрес электронной почты."),
    ("categories", {"name": "AB"},
     "Название категории должно содержать минимум 3 символа."),
    ("records", {"title": "Hi!", "content": ""},
     "Содержание не может быть пустым."),
    ("records", {"title": "Hi", "content": "text"},
     "Заголовок должен содержать минимум 3 символа."),
])
def test_rejects_with_reason(kind, fields, reason):
    result = validate_entry(kind, fields)
    assert result.valid is False
    assert result.message == reason


@pytest.mark.parametrize("kind, fields", [
    ("users", {"name": "Al", "email": "x@y.com"}),
    ("users", {"name": "Ann", "email": "ann@example.com"}),
    ("categories", {"name": "ABC"}),
    ("records", {"title": "Hi!", "content": "x"}),
])
def test_accepts_corrected_input(kind, fields):
    assert validate_entry(kind, fields).valid is True


def test_first_failing_rule_wins():
    result = validate_entry("users", {"name": "", "email": ""})
    assert result.message == "Имя должно содержать минимум 2 символа."


def test_category_description_not_checked():
    assert validate_entry("categories", {"name": "Work", "description": ""}).valid


def test_accepts_entity_kind_enum():
    assert validate_entry(EntityKind.CATEGORIES, {"name": "AB"}).valid is False


def test_unknown_kind_passes_through():
    assert validate_entry("audit_log", {}).valid is True


def test_partial_skips_missing_fields():
    assert validate_entry("users", {"role": "Admin"}, partial=True).valid is True


def test_partial_still_rejects_supplied_empty_value():
    result = validate_entry("records", {"content": ""}, partial=True)
    assert result.valid is False


def test_english_reasons():
    result = validate_entry("users", {"name": "A"}, locale=Locale.EN)
    assert result.message == "Name must contain at least 2 characters."
