# app/state.py
from dataclasses import dataclass

from fastapi import Request

from app.core.store_client import StoreClient, create_store_client
from app.repositories.cart_repo import CartRepository
from app.repositories.order_repo import OrderRepository
from app.repositories.product_repo import ProductRepository


# ---------------------------------------------------------
# Application state (single writer)
#
# Catalog, cart and order history live in memory for the lifetime of the
# process. All mutations happen on the event loop thread, either from a
# request handler or from an awaited store response, so no locks are used.
# Moving to threads means routing every mutation through one writer.
# ---------------------------------------------------------


@dataclass
class AppState:
    store: StoreClient
    catalog: ProductRepository
    cart: CartRepository
    orders: OrderRepository
    last_error: str | None = None


def build_state(store: StoreClient | None = None) -> AppState:
    """
    Wire repositories around a single StoreClient.
    """
    store = store or create_store_client()
    return AppState(
        store=store,
        catalog=ProductRepository(store),
        cart=CartRepository(),
        orders=OrderRepository(store),
    )


def get_state(request: Request) -> AppState:
    """
    FastAPI dependency that returns the process-wide AppState.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(state: AppState = Depends(get_state)):
            ...
    """
    return request.app.state.inventory
