# app/routers/cart.py
from typing import Annotated

from fastapi import APIRouter, Body, Depends

from app.schemas.cart import CartItemCreate, CartItemUpdate, CartSummary
from app.schemas.order import CustomerForm
from app.services.cart_service import CartService
from app.state import AppState, get_state

router = APIRouter(prefix="/cart", tags=["Cart"])

service = CartService()


@router.get("", response_model=CartSummary)
def get_cart(state: AppState = Depends(get_state)):
    """
    Get the pending memo with totals.
    """
    return service.get_cart_summary(state)


@router.post("", response_model=CartSummary)
def add_to_cart(
    payload: CartItemCreate,
    state: AppState = Depends(get_state),
):
    """
    Add a catalog product in its first size with stock.

    409 if the product is out of stock in every size.
    """
    service.add_by_id(state, payload.product_id)
    return service.get_cart_summary(state)


@router.patch("/{index}", response_model=CartSummary)
def update_cart_item(
    index: int,
    update: Annotated[CartItemUpdate, Body(discriminator="op")],
    state: AppState = Depends(get_state),
):
    """
    Edit size, price or quantity of one line.

    Body: {"op": "set_size" | "set_price" | "set_quantity", "value": ...}
    Unknown index is ignored.
    """
    service.update_cart_item(state, index, update)
    return service.get_cart_summary(state)


@router.delete("/{index}", response_model=CartSummary)
def remove_cart_item(
    index: int,
    state: AppState = Depends(get_state),
):
    """
    Remove the line at `index`. Unknown index is ignored.
    """
    service.remove_from_cart(state, index)
    return service.get_cart_summary(state)


@router.delete("", response_model=CartSummary)
def clear_cart(state: AppState = Depends(get_state)):
    """
    Clear the entire cart.
    """
    service.clear_cart(state)
    return service.get_cart_summary(state)


# -------- Customer form --------


@router.get("/customer", response_model=CustomerForm)
def get_customer(state: AppState = Depends(get_state)):
    return state.cart.customer


@router.put("/customer", response_model=CustomerForm)
def set_customer(
    payload: CustomerForm,
    state: AppState = Depends(get_state),
):
    """
    Replace the customer details attached to the pending memo.
    """
    return state.cart.set_customer(payload)
