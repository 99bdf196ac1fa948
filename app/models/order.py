# app/models/order.py
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field

from app.models.product import ProductSize, now_ms


class OrderItem(SQLModel):
    """
    Line of a cart or of a confirmed order.

    name and price are snapshots taken when the line was created; editing
    them never touches the product they came from.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: str
    name: str
    size: ProductSize
    price: int = Field(ge=0)
    quantity: int = Field(default=1, gt=0)

    @property
    def line_total(self) -> int:
        return self.price * self.quantity


class Order(SQLModel):
    """
    Confirmed customer order (the "memo").

    Wire shape (camelCase):
      - id, customerName, customerPhone, customerAddress,
        items, totalAmount, createdAt

    Immutable once built; total_amount is stored, never recomputed.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str
    customer_name: str
    customer_phone: str
    customer_address: str
    items: list[OrderItem]
    total_amount: int
    created_at: int = Field(default_factory=now_ms)
