# app/schemas/product.py
from pydantic import ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field

from app.models.product import ProductSize

# Stock pre-filled for a size when it is ticked without a count
DEFAULT_SIZE_STOCK = 10


class ProductCreate(SQLModel):
    """
    Payload of the product entry form.

    - sizes keeps the order in which sizes were selected.
    - stockBySize may omit selected sizes; they default to 10.
    - id and created_at are generated by the backend.
    """

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str = Field(max_length=255)
    price: int = Field(gt=0)
    sizes: list[ProductSize] = Field(min_length=1)
    stock_by_size: dict[ProductSize, int] = Field(default_factory=dict)
    image: str
    description: str = ""

    @field_validator("name", "image")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v

    @field_validator("sizes")
    @classmethod
    def unique_sizes(cls, v: list[ProductSize]) -> list[ProductSize]:
        if len(set(v)) != len(v):
            raise ValueError("sizes must not contain duplicates")
        return v

    @model_validator(mode="after")
    def fill_stock(self) -> "ProductCreate":
        stock: dict[ProductSize, int] = {}
        for size, qty in self.stock_by_size.items():
            if size not in self.sizes:
                raise ValueError(f"stock given for unselected size '{size}'")
            if qty < 0:
                raise ValueError(f"stock for size '{size}' cannot be negative")
        for size in self.sizes:
            stock[size] = self.stock_by_size.get(size, DEFAULT_SIZE_STOCK)
        self.stock_by_size = stock
        return self


class DescriptionRequest(SQLModel):
    """
    Input for the AI description suggestion.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    price: int = Field(gt=0)

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class DescriptionRead(SQLModel):
    description: str
