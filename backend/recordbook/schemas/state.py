"""State Schemas: the read-only snapshot and the caller-facing engine state.

Invariants:
    - Snapshot is frozen and holds tuples: callers cannot mutate the engine's view
    - Snapshot.empty() is the state before the first successful refresh
    - StateResponse serializes with camelCase keys (simulatedConnected, lastError)

Design Decisions:
    - Snapshot as a pydantic model rather than a dataclass: FastAPI serializes it
      as-is inside StateResponse
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from recordbook.schemas.entities import Category, RecordItem, User


class Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    users: tuple[User, ...] = ()
    categories: tuple[Category, ...] = ()
    records: tuple[RecordItem, ...] = ()

    @classmethod
    def empty(cls) -> "Snapshot":
        return cls()


class StateResponse(BaseModel):
    """Everything the UI reads from the engine."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    snapshot: Snapshot
    simulated_connected: bool
    store_connected: bool
    last_error: str | None = None


class GeneratedText(BaseModel):
    """SQL Lab output (init script or documentation)."""
    text: str
