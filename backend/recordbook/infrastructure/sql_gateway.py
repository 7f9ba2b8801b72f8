"""SQL Gateway: RemoteGateway implementation over SQLAlchemy Core.

Invariants:
    - select returns every row of the table ordered by id ascending
    - insert/update/delete commit in their own session; nothing is batched
    - update and delete filter by id equality only
    - delete returns the deleted rows (RETURNING); an empty list means no row matched
    - Rows are plain dicts keyed by column name (store naming convention)

Design Decisions:
    - Core statements built from Base.metadata instead of ORM objects: the engine
      works with generic rows per table, not per-model code paths
    - One session per call: refresh runs three selects concurrently, and an
      AsyncSession must not be shared between concurrent awaits
    - Empty update payload is a no-op (no statement sent)
"""

import logging

from sqlalchemy import Table, delete, insert, select, update

from recordbook.core.gateway_protocols import GatewayError, StoreRow
from recordbook.db.base import Base
from recordbook.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)


class SqlGateway:
    """Select/insert/update/delete against the relational store."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def select(self, table: str) -> list[StoreRow]:
        t = self._table(table)
        async with self._db.session() as session:
            result = await session.execute(select(t).order_by(t.c.id))
            return [dict(row) for row in result.mappings()]

    async def insert(self, table: str, row: StoreRow) -> None:
        t = self._table(table)
        async with self._db.session() as session:
            await session.execute(insert(t).values(**row))
            await session.commit()
        logger.info("Row inserted", extra={"entity_kind": table})

    async def update(
        self, table: str, entity_id: int, partial_row: StoreRow,
    ) -> None:
        t = self._table(table)
        if not partial_row:
            return
        async with self._db.session() as session:
            await session.execute(
                update(t).where(t.c.id == entity_id).values(**partial_row),
            )
            await session.commit()
        logger.info(
            "Row updated", extra={"entity_kind": table, "entity_id": entity_id},
        )

    async def delete(self, table: str, entity_id: int) -> list[StoreRow]:
        t = self._table(table)
        async with self._db.session() as session:
            result = await session.execute(
                delete(t).where(t.c.id == entity_id).returning(*t.c),
            )
            deleted = [dict(row) for row in result.mappings()]
            await session.commit()
        logger.info(
            f"Delete removed {len(deleted)} row(s)",
            extra={"entity_kind": table, "entity_id": entity_id},
        )
        return deleted

    def _table(self, name: str) -> Table:
        try:
            return Base.metadata.tables[name]
        except KeyError:
            raise GatewayError("42P01", f'relation "{name}" does not exist') from None
