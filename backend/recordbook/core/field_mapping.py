"""Field Mapping: application (camelCase) <-> store (snake_case) naming translation.

Invariants:
    - Names only: values pass through untouched
    - to_store / from_store are inverse projections over each kind's field set
    - records: userId<->user_id, categoryId<->category_id, createdAt<->created_at
    - to_store omits createdAt when it is absent or None, so the store default applies
    - rename_to_store touches only the renamed record keys; other keys pass through

Design Decisions:
    - One (app_name, store_name) table per kind: both directions derive from it,
      no hand-written mirror functions that can drift
    - Keys a kind does not define are dropped by to_store/from_store (projection)
"""

from collections.abc import Mapping
from typing import Any

_FIELDS: dict[str, tuple[tuple[str, str], ...]] = {
    "users": (
        ("id", "id"),
        ("name", "name"),
        ("email", "email"),
        ("role", "role"),
    ),
    "categories": (
        ("id", "id"),
        ("name", "name"),
        ("description", "description"),
    ),
    "records": (
        ("id", "id"),
        ("title", "title"),
        ("content", "content"),
        ("userId", "user_id"),
        ("categoryId", "category_id"),
        ("createdAt", "created_at"),
    ),
}

# Store defaults these when omitted on insert.
_OMIT_WHEN_NONE: dict[str, frozenset[str]] = {
    "records": frozenset({"createdAt"}),
}


def _pairs(kind: Any) -> tuple[tuple[str, str], ...]:
    key = getattr(kind, "value", kind)
    try:
        return _FIELDS[key]
    except KeyError:
        raise ValueError(f"Unknown entity kind: {key!r}") from None


def to_store(kind: Any, entity: Mapping[str, Any]) -> dict[str, Any]:
    """Project application fields onto store columns."""
    omit = _OMIT_WHEN_NONE.get(getattr(kind, "value", kind), frozenset())
    row: dict[str, Any] = {}
    for app_name, store_name in _pairs(kind):
        if app_name not in entity:
            continue
        if app_name in omit and entity[app_name] is None:
            continue
        row[store_name] = entity[app_name]
    return row


def from_store(kind: Any, row: Mapping[str, Any]) -> dict[str, Any]:
    """Project store columns onto application fields."""
    return {
        app_name: row[store_name]
        for app_name, store_name in _pairs(kind)
        if store_name in row
    }


def rename_to_store(kind: Any, partial: Mapping[str, Any]) -> dict[str, Any]:
    """Rename the differently-named fields of an update payload.

    Unlike to_store this is not a projection: keys that are not renamed
    are forwarded as-is.
    """
    renames = {a: s for a, s in _pairs(kind) if a != s}
    return {renames.get(k, k): v for k, v in partial.items()}
