# app/routers/stats.py
from fastapi import APIRouter, Depends

from app.schemas.stats import InventoryStats, SyncStatus
from app.services.stats_service import StatsService
from app.services.sync_service import SyncService
from app.state import AppState, get_state

router = APIRouter(tags=["Dashboard"])

service = StatsService()
sync_service = SyncService()


@router.get("/stats", response_model=InventoryStats)
def get_inventory_stats(state: AppState = Depends(get_state)):
    """
    Product count, total units in stock and order count.
    """
    return service.get_inventory_stats(state)


@router.post("/sync", response_model=SyncStatus)
async def sync(state: AppState = Depends(get_state)):
    """
    Reload catalog and order history from the persistence service.

    A catalog failure is reported in `error` (catalog is then empty);
    an unavailable history just comes back empty.
    """
    return await sync_service.refresh(state)
