"""Entity Schemas: typed entities and per-kind create/update payloads.

Invariants:
    - Entities are frozen: a snapshot is replaced, never patched in place
    - JSON / application naming is camelCase (alias_generator), Python attributes snake_case
    - Payload models carry types only; field rules live in core/validate_entry so the
      Validator stays the single source of rejection reasons
    - Update payloads are all-optional; to_app_fields(exclude_unset=True) yields
      exactly the supplied fields

Design Decisions:
    - One Create/Update pair per kind instead of Partial[Any] dicts: field-name drift
      between conventions fails at parse time
    - extra="ignore": unknown keys from the UI are dropped, not forwarded to the store
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from recordbook.core.domain_types import EntityKind, UserRole


class _AppModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
        use_enum_values=True,
    )

    def to_app_fields(self, exclude_unset: bool = False) -> dict:
        """Fields keyed by application (camelCase) names.

        Creates dump defaults too; updates pass exclude_unset=True so only
        the supplied fields travel.
        """
        return self.model_dump(by_alias=True, exclude_unset=exclude_unset)


class _Entity(_AppModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True,
        use_enum_values=True,
    )


# ─── Entities (snapshot rows) ───────────────────────────────────

class User(_Entity):
    id: int
    name: str | None = None
    email: str | None = None
    role: UserRole | str | None = None


class Category(_Entity):
    id: int
    name: str | None = None
    description: str | None = None


class RecordItem(_Entity):
    id: int
    title: str | None = None
    content: str | None = None
    user_id: int | None = None
    category_id: int | None = None
    created_at: datetime | None = None


# ─── Payloads ───────────────────────────────────────────────────

class UserCreate(_AppModel):
    name: str | None = None
    email: str | None = None
    role: UserRole = UserRole.VIEWER


class UserUpdate(_AppModel):
    name: str | None = None
    email: str | None = None
    role: UserRole | None = None


class CategoryCreate(_AppModel):
    name: str | None = None
    description: str | None = None


class CategoryUpdate(_AppModel):
    name: str | None = None
    description: str | None = None


class RecordCreate(_AppModel):
    title: str | None = None
    content: str | None = None
    user_id: int | None = None
    category_id: int | None = None
    created_at: datetime | None = None


class RecordUpdate(_AppModel):
    title: str | None = None
    content: str | None = None
    user_id: int | None = None
    category_id: int | None = None
    created_at: datetime | None = None


ENTITY_MODELS: dict[EntityKind, type[_Entity]] = {
    EntityKind.USERS: User,
    EntityKind.CATEGORIES: Category,
    EntityKind.RECORDS: RecordItem,
}

CREATE_MODELS: dict[EntityKind, type[_AppModel]] = {
    EntityKind.USERS: UserCreate,
    EntityKind.CATEGORIES: CategoryCreate,
    EntityKind.RECORDS: RecordCreate,
}

UPDATE_MODELS: dict[EntityKind, type[_AppModel]] = {
    EntityKind.USERS: UserUpdate,
    EntityKind.CATEGORIES: CategoryUpdate,
    EntityKind.RECORDS: RecordUpdate,
}
