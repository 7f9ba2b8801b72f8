"""Entity Mutations: create, update and delete for users, categories and records.

Invariants:
    - Every mutation goes through the SyncEngine (gates, validation, refresh)
    - Success returns the refreshed engine state
    - Failures surface as RecordbookError JSON (see api/error_handlers.py) while
      the engine also keeps the message in lastError

Design Decisions:
    - Body accepted as a plain JSON object: the engine coerces it through the
      kind's typed payload so validation reasons come from one place
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from recordbook.api.dependencies import get_engine
from recordbook.core.domain_types import EntityKind
from recordbook.schemas.state import StateResponse
from recordbook.services.sync_engine import SyncEngine

router = APIRouter(prefix="/api/v1/entities", tags=["entities"])


@router.post(
    "/{kind}", response_model=StateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_entity(
    kind: EntityKind,
    fields: dict[str, Any] = Body(...),
    engine: SyncEngine = Depends(get_engine),
):
    await engine.create(kind, fields)
    return engine.state()


@router.patch("/{kind}/{entity_id}", response_model=StateResponse)
async def update_entity(
    kind: EntityKind,
    entity_id: int,
    fields: dict[str, Any] = Body(...),
    engine: SyncEngine = Depends(get_engine),
):
    await engine.update(kind, entity_id, fields)
    return engine.state()


@router.delete("/{kind}/{entity_id}", response_model=StateResponse)
async def delete_entity(
    kind: EntityKind,
    entity_id: int,
    engine: SyncEngine = Depends(get_engine),
):
    await engine.delete(kind, entity_id)
    return engine.state()
