# app/repositories/order_repo.py
import logging

from pydantic import ValidationError

from app.core.errors import InventoryError
from app.core.store_client import StoreClient
from app.models.order import Order

logger = logging.getLogger(__name__)


class OrderRepository:
    """
    In-memory order history.

    NOTE:
      - Unlike the catalog, a failed load degrades to an empty history
        and only logs a warning; it never raises.
      - Only the checkout path writes orders.
    """

    def __init__(self, store: StoreClient):
        self.store = store
        self.orders: list[Order] = []
        self._requested = 0
        self._applied = 0

    def list_all(self) -> list[Order]:
        return list(self.orders)

    def _apply(self, token: int, orders: list[Order]) -> None:
        if token < self._applied:
            logger.info("Discarding stale order history response (token %s < %s)", token, self._applied)
            return
        self.orders = orders
        self._applied = token

    async def load(self) -> list[Order]:
        self._requested += 1
        token = self._requested

        try:
            raw = await self.store.fetch_orders()
        except InventoryError as e:
            logger.warning(
                "Order history unavailable (%s): %s %r",
                e.kind,
                e.message,
                getattr(e, "body", None) or "",
            )
            self._apply(token, [])
            return self.list_all()

        if not isinstance(raw, list):
            logger.warning("Order history is not a JSON array: %.200r", raw)
            self._apply(token, [])
            return self.list_all()

        try:
            orders = [Order.model_validate(item) for item in raw]
        except ValidationError as e:
            logger.warning("Order history parse error: %s", e)
            orders = []

        self._apply(token, orders)
        return self.list_all()

    async def create(self, order: Order) -> None:
        """
        Persist a confirmed order remotely. History itself is refreshed by the caller.
        """
        await self.store.place_order(order.model_dump(mode="json", by_alias=True))
