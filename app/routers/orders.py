# app/routers/orders.py
from fastapi import APIRouter, Depends, status

from app.models.order import Order
from app.services.order_service import OrderService
from app.services.sync_service import SyncService
from app.state import AppState, get_state

router = APIRouter(prefix="/orders", tags=["Orders"])

service = OrderService(SyncService())


@router.get("", response_model=list[Order])
def list_orders(state: AppState = Depends(get_state)):
    """
    Order history as last loaded from the persistence service.
    """
    return service.list_orders(state)


@router.post(
    "/checkout",
    response_model=Order,
    status_code=status.HTTP_201_CREATED,
)
async def checkout(state: AppState = Depends(get_state)):
    """
    Turn the cart + customer form into a confirmed order.

    - 400 MissingField / EmptyCart: nothing is sent.
    - 502 RejectedByStore / FetchFailed: cart and form are kept for retry.
    """
    return await service.place_order(state)
