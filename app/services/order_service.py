# app/services/order_service.py
import logging
from typing import Iterable

from app.core.errors import EmptyCart, MissingField
from app.models.order import Order, OrderItem
from app.models.product import now_ms
from app.schemas.order import CustomerForm
from app.services.sync_service import SyncService
from app.state import AppState

logger = logging.getLogger(__name__)

REQUIRED_CUSTOMER_FIELDS = ("customer_name", "customer_phone", "customer_address")


def compute_total(items: Iterable[OrderItem]) -> int:
    """Sum of price * quantity over all lines; 0 for an empty cart."""
    return sum(item.price * item.quantity for item in items)


def generate_order_id(created_at: int) -> str:
    """
    Order id from the last six digits of the millisecond timestamp.

    Only unique within a single terminal's session.
    """
    return f"ORD-{str(created_at)[-6:]}"


class OrderService:
    """
    Business logic for checkout and order history.

    Checkout is strictly ordered, each step gated on the previous one:
      1. validate customer form and cart (all-or-nothing)
      2. build the immutable Order snapshot
      3. write it to the persistence service
      4. refresh catalog + history from remote
      5. clear cart and customer form

    A failed write leaves cart and form untouched.
    """

    def __init__(self, sync_service: SyncService):
        self.sync_service = sync_service

    # -------- Validation & pricing --------

    def validate_checkout(self, form: CustomerForm, items: list[OrderItem]) -> None:
        missing = [
            name for name in REQUIRED_CUSTOMER_FIELDS
            if not getattr(form, name).strip()
        ]
        if missing:
            raise MissingField(missing)
        if not items:
            raise EmptyCart()

    def confirm(self, form: CustomerForm, items: list[OrderItem]) -> Order:
        """
        Build the Order record. Call only after validate_checkout passed.

        Items are copied so later cart edits cannot reach the order.
        """
        frozen_items = [item.model_copy() for item in items]
        created_at = now_ms()
        return Order(
            id=generate_order_id(created_at),
            customer_name=form.customer_name.strip(),
            customer_phone=form.customer_phone.strip(),
            customer_address=form.customer_address.strip(),
            items=frozen_items,
            total_amount=compute_total(frozen_items),
            created_at=created_at,
        )

    # -------- Operations --------

    async def place_order(self, state: AppState) -> Order:
        # 1) Validate
        self.validate_checkout(state.cart.customer, state.cart.items)

        # 2) Snapshot
        ordered_lines = state.cart.list_items()
        order = self.confirm(state.cart.customer, ordered_lines)

        # 3) Remote write (raises RejectedByStore / FetchFailed)
        await state.orders.create(order)
        logger.info("Order %s placed (%s items, total %s)", order.id, len(order.items), order.total_amount)

        # 4) Refresh
        await self.sync_service.refresh(state)

        # 5) Clear only what was ordered; lines added meanwhile stay
        state.cart.discard(ordered_lines)
        state.cart.reset_customer()
        return order

    def list_orders(self, state: AppState) -> list[Order]:
        return state.orders.list_all()
