# app/schemas/stats.py
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel


class InventoryStats(SQLModel):
    """
    Dashboard counters.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_products: int
    total_items_in_stock: int
    total_orders: int


class SyncStatus(SQLModel):
    """
    Outcome of a catalog + order history refresh.

    error is the catalog failure message, if any; history failures are
    never reported here.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    products: int
    orders: int
    error: str | None = None
