# app/services/cart_service.py
from app.core.errors import OutOfStock, ProductNotFound
from app.models.order import OrderItem
from app.models.product import Product
from app.schemas.cart import (
    CartItemRead,
    CartItemUpdate,
    CartSummary,
    SetPrice,
    SetQuantity,
    SetSize,
)
from app.state import AppState


class CartService:
    """
    Builds the pending memo from catalog stock.

    Rules:
      - a product enters the cart in the first declared size with stock > 0
      - the line snapshots name and current price, quantity starts at 1
      - removal / update by position; out-of-range positions are no-ops
      - edits are not re-checked against catalog stock
    """

    # ---- public operations ----

    def add_to_cart(self, state: AppState, product: Product) -> OrderItem:
        """
        Append a line for `product`.

        Raises OutOfStock (cart unchanged) if no size has stock.
        """
        size = product.first_available_size()
        if size is None:
            raise OutOfStock(f"'{product.name}' is currently out of stock")

        item = OrderItem(
            product_id=product.id,
            name=product.name,
            size=size,
            price=product.price,
            quantity=1,
        )
        return state.cart.append(item)

    def add_by_id(self, state: AppState, product_id: str) -> OrderItem:
        product = state.catalog.get_by_id(product_id)
        if not product:
            raise ProductNotFound()
        return self.add_to_cart(state, product)

    def remove_from_cart(self, state: AppState, index: int) -> None:
        state.cart.delete(index)

    def update_cart_item(
        self,
        state: AppState,
        index: int,
        update: CartItemUpdate,
    ) -> OrderItem | None:
        """
        Apply a single-field edit to the line at `index`.

        Returns the edited line, or None if the index is out of range.
        """
        item = state.cart.get(index)
        if item is None:
            return None

        if isinstance(update, SetSize):
            item.size = update.value
        elif isinstance(update, SetPrice):
            item.price = update.value
        elif isinstance(update, SetQuantity):
            item.quantity = update.value
        return item

    def clear_cart(self, state: AppState) -> None:
        state.cart.clear()

    def get_cart_summary(self, state: AppState) -> CartSummary:
        """
        Return full cart summary:
          - lines resolved against the catalog (image, sizes, stock)
          - total_quantity
          - total_amount
        """
        item_reads: list[CartItemRead] = []
        total_qty = 0
        total_amount = 0

        for index, it in enumerate(state.cart.items):
            product = state.catalog.get_by_id(it.product_id)
            total_qty += it.quantity
            total_amount += it.line_total

            item_reads.append(
                CartItemRead(
                    index=index,
                    product_id=it.product_id,
                    name=it.name,
                    size=it.size,
                    price=it.price,
                    quantity=it.quantity,
                    line_total=it.line_total,
                    image=product.image if product else None,
                    product_sizes=list(product.sizes) if product else None,
                    stock_by_size=dict(product.stock_by_size) if product else None,
                )
            )

        return CartSummary(
            items=item_reads,
            total_quantity=total_qty,
            total_amount=total_amount,
        )
