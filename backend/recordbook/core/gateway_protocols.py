"""Gateway Protocols: the call shape the Sync Engine requires of any store client.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Rows crossing this boundary use the store's naming convention (snake_case)
    - select returns rows ordered by id ascending
    - delete returns the deleted rows; an empty list means nothing was removed
    - Every failure surfaces as GatewayError carrying code + message

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - GatewayError is the raw failure payload, not a taxonomy kind:
      classify_errors turns it into one
"""

from typing import Any, Protocol

StoreRow = dict[str, Any]


class GatewayError(Exception):
    """Raw failure reported by the remote store.

    code is a PostgreSQL SQLSTATE when the driver exposes one
    ("42501", "23503", "42P01", ...), otherwise a short symbolic code.
    """

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"GatewayError(code={self.code!r}, message={self.message!r})"


class RemoteGateway(Protocol):
    """Contract for the remote relational store, implemented by the shell."""
    async def select(self, table: str) -> list[StoreRow]: ...
    async def insert(self, table: str, row: StoreRow) -> None: ...
    async def update(
        self, table: str, entity_id: int, partial_row: StoreRow,
    ) -> None: ...
    async def delete(self, table: str, entity_id: int) -> list[StoreRow]: ...


class TextGenerator(Protocol):
    """Contract for the free-text generation collaborator."""
    async def generate(self, prompt: str) -> str: ...
