# app/services/sync_service.py
import asyncio
import logging

from app.core.errors import InventoryError
from app.schemas.stats import SyncStatus
from app.state import AppState

logger = logging.getLogger(__name__)


class SyncService:
    """
    Refreshes catalog and order history from the persistence service.

    Both loads run concurrently and may finish in either order. A catalog
    failure is kept on state.last_error (the catalog itself is already
    emptied by the repository); history failures degrade silently.
    """

    async def refresh(self, state: AppState) -> SyncStatus:
        state.last_error = None
        catalog_result, history_result = await asyncio.gather(
            state.catalog.load(),
            state.orders.load(),
            return_exceptions=True,
        )

        if isinstance(catalog_result, InventoryError):
            logger.error("Catalog refresh failed (%s): %s", catalog_result.kind, catalog_result.message)
            state.last_error = catalog_result.message
        elif isinstance(catalog_result, BaseException):
            raise catalog_result
        if isinstance(history_result, BaseException):
            raise history_result

        return SyncStatus(
            products=len(state.catalog.products),
            orders=len(state.orders.orders),
            error=state.last_error,
        )
