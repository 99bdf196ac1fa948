# app/services/stats_service.py
from app.schemas.stats import InventoryStats
from app.state import AppState


class StatsService:
    """
    Dashboard counters computed from the in-memory stores.
    """

    def get_inventory_stats(self, state: AppState) -> InventoryStats:
        return InventoryStats(
            total_products=len(state.catalog.products),
            total_items_in_stock=sum(p.total_stock for p in state.catalog.products),
            total_orders=len(state.orders.orders),
        )
