"""Domain Types: rich types that replace bare strings and ints across the codebase.

Invariants:
    - EntityKind values are the store's table names (users, categories, records)
    - Entity identities are store-assigned ints, never generated locally
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (FastAPI responses)
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """The three synchronized collections. Value == table name."""
    USERS = "users"
    CATEGORIES = "categories"
    RECORDS = "records"


class UserRole(str, Enum):
    """Roles a User may hold."""
    ADMIN = "Admin"
    EDITOR = "Editor"
    VIEWER = "Viewer"


class Operation(str, Enum):
    """Gateway operations, used for error classification and log context."""
    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


class Locale(str, Enum):
    """Languages available for user-facing error messages and generated text."""
    EN = "en"
    RU = "ru"
