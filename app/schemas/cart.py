# app/schemas/cart.py
from typing import Literal, Union

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field

from app.models.product import ProductSize


class CartItemCreate(SQLModel):
    """
    Payload for adding a catalog product to the cart.
    Size is picked by the backend (first size with stock).
    """

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    product_id: str


# ---- Line updates: one variant per editable field ----


class SetSize(SQLModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["set_size"]
    value: ProductSize


class SetPrice(SQLModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["set_price"]
    value: int = Field(ge=0)


class SetQuantity(SQLModel):
    model_config = ConfigDict(extra="forbid")

    op: Literal["set_quantity"]
    value: int = Field(gt=0)


# Tagged by `op`
CartItemUpdate = Union[SetSize, SetPrice, SetQuantity]


class CartItemRead(SQLModel):
    """
    A cart line as displayed, resolved against the catalog.

    productSizes / stockBySize are None when the product is no longer
    in the catalog.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    index: int
    product_id: str
    name: str
    size: ProductSize
    price: int
    quantity: int
    line_total: int
    image: str | None = None
    product_sizes: list[ProductSize] | None = None
    stock_by_size: dict[ProductSize, int] | None = None


class CartSummary(SQLModel):
    """
    Full cart response model with totals.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[CartItemRead]
    total_quantity: int
    total_amount: int
