# app/schemas/order.py
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel


class CustomerForm(SQLModel):
    """
    Customer details typed in next to the cart.

    Kept as entered; trimming happens only when checkout validates them.
    """

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    customer_name: str = ""
    customer_phone: str = ""
    customer_address: str = ""
