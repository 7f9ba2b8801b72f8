"""Sync Engine: mediates every read/write between callers and the remote store.

Invariants:
    - Owns the snapshot, the simulated-connectivity flag and the last-error slot;
      every write to them is a whole-value replacement
    - refresh() never checks simulated connectivity; it always hits the store
    - Mutations run gate -> validate -> map -> gateway call -> refresh, in that order
    - A failed mutation leaves the snapshot untouched, stores exactly one
      classified message in last_error, and re-raises the classified error
    - delete() treats an empty returned row set as SilentNoOpError
    - Any exception raised by the gateway is classified; one that is not a
      GatewayError becomes a BackendFailureError with backend code UNKNOWN
    - No retries: every failure is surfaced to the caller immediately

Design Decisions:
    - Instantiated once per process by the app lifespan and injected into routes;
      never looked up through a module global
    - Mutations are not serialized: concurrent calls race at the store and the
      last refresh to finish wins (matches store last-write-wins)
    - A refresh failing after a successful write is recorded in last_error but does
      not fail the write: the store already holds the change
"""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any, NoReturn

from pydantic import BaseModel, ValidationError

from recordbook.core.classify_errors import (
    as_gateway_error,
    classify_refresh_failure,
    classify_write_failure,
    silent_no_op,
    simulated_disconnect,
    validation_rejected,
)
from recordbook.core.domain_types import EntityKind, Locale, Operation
from recordbook.core.errors import ErrorContext, RecordbookError
from recordbook.core.field_mapping import from_store, rename_to_store, to_store
from recordbook.core.gateway_protocols import RemoteGateway
from recordbook.core.language_strings import get_string
from recordbook.core.validate_entry import validate_entry
from recordbook.schemas.entities import (
    CREATE_MODELS, ENTITY_MODELS, UPDATE_MODELS,
)
from recordbook.schemas.state import Snapshot, StateResponse

logger = logging.getLogger(__name__)

EntityFields = Mapping[str, Any] | BaseModel


class SyncEngine:
    """Authoritative in-memory view of users, categories and records."""

    def __init__(self, gateway: RemoteGateway, locale: Locale = Locale.RU):
        self._gateway = gateway
        self._locale = locale
        self._snapshot = Snapshot.empty()
        self._simulated_connected = True
        self._store_connected = False
        self._last_error: str | None = None

    # ─── Read-only surface ──────────────────────────────────────

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def simulated_connected(self) -> bool:
        return self._simulated_connected

    @property
    def store_connected(self) -> bool:
        """True when the last refresh reached the real store."""
        return self._store_connected

    @property
    def last_error(self) -> str | None:
        return self._last_error

    def state(self) -> StateResponse:
        return StateResponse(
            snapshot=self._snapshot,
            simulated_connected=self._simulated_connected,
            store_connected=self._store_connected,
            last_error=self._last_error,
        )

    # ─── Local state ────────────────────────────────────────────

    def toggle_connectivity(self) -> bool:
        """Flip simulated connectivity and clear the last error."""
        self._simulated_connected = not self._simulated_connected
        self._last_error = None
        logger.info(
            f"Simulated connectivity {'on' if self._simulated_connected else 'off'}",
        )
        return self._simulated_connected

    def clear_error(self) -> None:
        self._last_error = None

    # ─── Store operations ───────────────────────────────────────

    async def refresh(self) -> Snapshot:
        """Fetch all three collections in parallel and replace the snapshot."""
        kinds = (EntityKind.USERS, EntityKind.CATEGORIES, EntityKind.RECORDS)
        results = await asyncio.gather(
            *(self._gateway.select(k.value) for k in kinds),
            return_exceptions=True,
        )
        for kind, result in zip(kinds, results):
            if isinstance(result, Exception):
                self._store_connected = False
                ctx = ErrorContext(
                    entity_kind=kind.value, operation=Operation.SELECT.value,
                )
                self._fail(classify_refresh_failure(
                    as_gateway_error(result), self._locale, ctx,
                ), result)
            if isinstance(result, BaseException):
                raise result

        users, categories, records = results
        self._snapshot = Snapshot(
            users=self._parse_rows(EntityKind.USERS, users),
            categories=self._parse_rows(EntityKind.CATEGORIES, categories),
            records=self._parse_rows(EntityKind.RECORDS, records),
        )
        self._store_connected = True
        self._last_error = None
        logger.info(
            f"Snapshot refreshed: {len(users)} users, "
            f"{len(categories)} categories, {len(records)} records",
        )
        return self._snapshot

    async def create(self, kind: EntityKind | str, fields: EntityFields) -> None:
        kind = EntityKind(kind)
        ctx = ErrorContext(entity_kind=kind.value, operation=Operation.INSERT.value)
        self._last_error = None
        self._require_connection(Operation.INSERT, ctx)

        app_fields = self._parse_payload(kind, fields, partial=False, ctx=ctx)
        self._require_valid(kind, app_fields, partial=False, ctx=ctx)
        row = to_store(kind, app_fields)
        row.pop("id", None)

        try:
            await self._gateway.insert(kind.value, row)
        except Exception as e:
            self._fail(classify_write_failure(
                Operation.INSERT, as_gateway_error(e), self._locale, ctx,
            ), e)
        await self._refresh_after_write()

    async def update(
        self, kind: EntityKind | str, entity_id: int, fields: EntityFields,
    ) -> None:
        kind = EntityKind(kind)
        ctx = ErrorContext(
            entity_kind=kind.value, entity_id=entity_id,
            operation=Operation.UPDATE.value,
        )
        self._last_error = None
        self._require_connection(Operation.UPDATE, ctx)

        partial = self._parse_payload(kind, fields, partial=True, ctx=ctx)
        self._require_valid(kind, partial, partial=True, ctx=ctx)
        row = rename_to_store(kind, partial)
        row.pop("id", None)

        try:
            await self._gateway.update(kind.value, entity_id, row)
        except Exception as e:
            self._fail(classify_write_failure(
                Operation.UPDATE, as_gateway_error(e), self._locale, ctx,
            ), e)
        await self._refresh_after_write()

    async def delete(self, kind: EntityKind | str, entity_id: int) -> None:
        kind = EntityKind(kind)
        ctx = ErrorContext(
            entity_kind=kind.value, entity_id=entity_id,
            operation=Operation.DELETE.value,
        )
        self._last_error = None
        self._require_connection(Operation.DELETE, ctx)

        try:
            deleted = await self._gateway.delete(kind.value, entity_id)
        except Exception as e:
            self._fail(classify_write_failure(
                Operation.DELETE, as_gateway_error(e), self._locale, ctx,
            ), e)
        if not deleted:
            self._fail(silent_no_op(self._locale, ctx))
        await self._refresh_after_write()

    # ─── Gates and helpers ──────────────────────────────────────

    def _require_connection(
        self, operation: Operation, ctx: ErrorContext,
    ) -> None:
        if not self._simulated_connected:
            self._fail(simulated_disconnect(operation, self._locale, ctx))

    def _require_valid(
        self, kind: EntityKind, fields: Mapping[str, Any],
        partial: bool, ctx: ErrorContext,
    ) -> None:
        result = validate_entry(kind, fields, partial=partial, locale=self._locale)
        if not result.valid:
            self._fail(validation_rejected(result.message or "", self._locale, ctx))

    def _parse_payload(
        self, kind: EntityKind, fields: EntityFields,
        partial: bool, ctx: ErrorContext,
    ) -> dict[str, Any]:
        """Coerce raw fields through the kind's typed payload model."""
        if isinstance(fields, BaseModel):
            fields = fields.model_dump(by_alias=True, exclude_unset=True)
        model = (UPDATE_MODELS if partial else CREATE_MODELS)[kind]
        try:
            payload = model.model_validate(fields)
        except ValidationError as e:
            detail = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            reason = get_string("payload_invalid", self._locale, detail=detail)
            self._fail(validation_rejected(reason, self._locale, ctx), e)
        return payload.to_app_fields(exclude_unset=partial)

    def _parse_rows(self, kind: EntityKind, rows: list[dict]) -> tuple:
        model = ENTITY_MODELS[kind]
        return tuple(model.model_validate(from_store(kind, row)) for row in rows)

    async def _refresh_after_write(self) -> None:
        try:
            await self.refresh()
        except RecordbookError as e:
            # Write already committed; refresh recorded its own error.
            logger.warning(
                f"Refresh after write failed: {e.message}",
                extra={"error_code": e.code},
            )

    def _fail(
        self, err: RecordbookError, cause: BaseException | None = None,
    ) -> NoReturn:
        self._last_error = err.message
        logger.error(
            err.message,
            extra={
                "error_code": err.code,
                "entity_kind": err.context.entity_kind,
                "entity_id": err.context.entity_id,
                "operation": err.context.operation,
                "backend_code": err.context.backend_code,
            },
        )
        raise err from cause
