# app/models/product.py
import time
from typing import Any, Literal

from pydantic import ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field

ProductSize = Literal["S", "M", "L", "XL", "XXL", "Free Size"]

# Closed set of sizes, in the order the entry form offers them
AVAILABLE_SIZES: tuple[ProductSize, ...] = ("S", "M", "L", "XL", "XXL", "Free Size")


def now_ms() -> int:
    """Current time as integer epoch milliseconds (wire timestamp format)."""
    return int(time.time() * 1000)


class Product(SQLModel):
    """
    Catalog entry with per-size stock.

    Wire shape (camelCase):
      - id, name, price, stockBySize, sizes, image, description, createdAt

    Invariants:
      - sizes has no duplicates
      - every key of stock_by_size is listed in sizes
      - stock counts are >= 0; a size with no entry counts as zero
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(min_length=1)
    name: str
    price: int = Field(gt=0, description="Unit price in whole currency units")
    stock_by_size: dict[ProductSize, int] = Field(default_factory=dict)
    sizes: list[ProductSize] = Field(default_factory=list)
    image: str = Field(default="", description="Opaque image reference (data URL)")
    description: str = ""
    created_at: int = Field(default_factory=now_ms)

    @field_validator("stock_by_size", mode="before")
    @classmethod
    def empty_stock_map(cls, v: Any) -> Any:
        # PHP encodes an empty map as [] and a missing one as null
        if v is None or v == []:
            return {}
        return v

    @field_validator("sizes")
    @classmethod
    def unique_sizes(cls, v: list[ProductSize]) -> list[ProductSize]:
        if len(set(v)) != len(v):
            raise ValueError("sizes must not contain duplicates")
        return v

    @model_validator(mode="after")
    def stock_matches_sizes(self) -> "Product":
        for size, qty in self.stock_by_size.items():
            if size not in self.sizes:
                raise ValueError(f"stock given for size '{size}' not offered by product")
            if qty < 0:
                raise ValueError(f"stock for size '{size}' cannot be negative")
        return self

    def stock_for(self, size: ProductSize) -> int:
        return self.stock_by_size.get(size, 0)

    def first_available_size(self) -> ProductSize | None:
        """First size, in declared order, with stock > 0."""
        for size in self.sizes:
            if self.stock_for(size) > 0:
                return size
        return None

    @property
    def total_stock(self) -> int:
        return sum(self.stock_by_size.values())
