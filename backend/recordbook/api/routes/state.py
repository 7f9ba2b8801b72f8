"""Engine State: snapshot, connectivity toggle, last error and manual refresh.

Invariants:
    - GET returns the engine state exactly as held (no store call)
    - POST /refresh always reaches the store, even when simulated offline
    - Toggle and clear-error are local: no store call
"""

from fastapi import APIRouter, Depends, status

from recordbook.api.dependencies import get_engine
from recordbook.schemas.state import StateResponse
from recordbook.services.sync_engine import SyncEngine

router = APIRouter(prefix="/api/v1/state", tags=["state"])


@router.get("", response_model=StateResponse)
async def read_state(engine: SyncEngine = Depends(get_engine)):
    return engine.state()


@router.post("/refresh", response_model=StateResponse)
async def refresh(engine: SyncEngine = Depends(get_engine)):
    await engine.refresh()
    return engine.state()


@router.post("/connectivity/toggle", response_model=StateResponse)
async def toggle_connectivity(engine: SyncEngine = Depends(get_engine)):
    engine.toggle_connectivity()
    return engine.state()


@router.delete("/error", status_code=status.HTTP_204_NO_CONTENT)
async def clear_error(engine: SyncEngine = Depends(get_engine)):
    engine.clear_error()
