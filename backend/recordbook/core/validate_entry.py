"""Entry Validation: field rules checked before any network call.

Invariants:
    - Pure: output depends only on (kind, fields, partial, locale)
    - users: name >= 2 chars, email contains "@"
    - categories: name >= 3 chars (description is not checked here)
    - records: title >= 3 chars, content non-empty
    - Unknown kinds are accepted unconditionally
    - partial=True skips rules whose field was not supplied; a supplied
      None or empty value is still rejected

Design Decisions:
    - Rules as (field, predicate, message_key) tuples: first failing rule wins,
      matching the order users see in forms
    - fields use the application naming convention (camelCase keys)
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from recordbook.core.domain_types import Locale
from recordbook.core.language_strings import get_string


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    message: str | None = None


def _min_length(n: int) -> Callable[[Any], bool]:
    return lambda v: bool(v) and len(v) >= n


def _has_at_sign(v: Any) -> bool:
    return bool(v) and "@" in v


_RULES: dict[str, tuple[tuple[str, Callable[[Any], bool], str], ...]] = {
    "users": (
        ("name", _min_length(2), "user_name_too_short"),
        ("email", _has_at_sign, "user_email_invalid"),
    ),
    "categories": (
        ("name", _min_length(3), "category_name_too_short"),
    ),
    "records": (
        ("title", _min_length(3), "record_title_too_short"),
        ("content", bool, "record_content_empty"),
    ),
}


def validate_entry(
    kind: str,
    fields: Mapping[str, Any],
    partial: bool = False,
    locale: Locale = Locale.RU,
) -> ValidationResult:
    """Validate candidate fields for an entity kind."""
    for name, check, message_key in _RULES.get(_kind_value(kind), ()):
        if partial and name not in fields:
            continue
        if not check(fields.get(name)):
            return ValidationResult(False, get_string(message_key, locale))
    return ValidationResult(True)


def _kind_value(kind: Any) -> Any:
    # EntityKind members compare equal to their values but str() shows the name
    return getattr(kind, "value", kind)
