# app/repositories/cart_repo.py
from app.models.order import OrderItem
from app.schemas.order import CustomerForm


class CartRepository:
    """
    The pending memo: ordered cart lines plus the customer form.

    Lines are addressed by position; out-of-range positions are ignored so
    stale indices from a re-rendered client never fail.
    """

    def __init__(self):
        self.items: list[OrderItem] = []
        self.customer = CustomerForm()

    # Lines
    def list_items(self) -> list[OrderItem]:
        return list(self.items)

    def get(self, index: int) -> OrderItem | None:
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    def append(self, item: OrderItem) -> OrderItem:
        self.items.append(item)
        return item

    def delete(self, index: int) -> bool:
        if 0 <= index < len(self.items):
            del self.items[index]
            return True
        return False

    def clear(self) -> None:
        self.items = []

    def discard(self, lines: list[OrderItem]) -> None:
        """Drop exactly these line objects, wherever they sit now."""
        gone = {id(line) for line in lines}
        self.items = [item for item in self.items if id(item) not in gone]

    # Customer form
    def set_customer(self, form: CustomerForm) -> CustomerForm:
        self.customer = form.model_copy()
        return self.customer

    def reset_customer(self) -> None:
        self.customer = CustomerForm()
