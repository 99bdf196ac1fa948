# app/services/product_service.py
import uuid

from app.core.errors import ConfirmationRequired, ProductNotFound
from app.core.genai_client import generate_product_description
from app.models.product import Product, now_ms
from app.schemas.product import DescriptionRequest, ProductCreate
from app.state import AppState


class ProductService:
    """
    Business logic for the catalog.

    Responsibilities:
      - turn the entry form into a Product (client id, timestamp)
      - list / filter / paginate the in-memory catalog
      - delete behind an explicit confirmation
      - AI description suggestions
    """

    # ----- Products -----

    def list_products(
        self,
        state: AppState,
        q: str | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[Product]:
        products = state.catalog.search(q) if q else state.catalog.list_all()
        end = None if limit is None else skip + limit
        return products[skip:end]

    def get_product(self, state: AppState, product_id: str) -> Product:
        product = state.catalog.get_by_id(product_id)
        if not product:
            raise ProductNotFound()
        return product

    async def create_product(self, state: AppState, payload: ProductCreate) -> Product:
        """
        Create a product and push it to the persistence service.

        The catalog shows it immediately; if the write is rejected the
        catalog is rolled back and the error propagates.
        """
        product = Product(
            id=str(uuid.uuid4()),
            name=payload.name,
            price=payload.price,
            stock_by_size=payload.stock_by_size,
            sizes=payload.sizes,
            image=payload.image,
            description=payload.description,
            created_at=now_ms(),
        )
        return await state.catalog.add(product)

    async def delete_product(
        self,
        state: AppState,
        product_id: str,
        confirmed: bool,
    ) -> bool:
        """
        Delete a product by id once the caller confirmed it.

        Returns whether a catalog entry was removed (False if the id was unknown).
        """
        if not confirmed:
            raise ConfirmationRequired()
        return await state.catalog.remove(product_id)

    # ----- Description assistant -----

    async def suggest_description(self, payload: DescriptionRequest) -> str:
        return await generate_product_description(payload.name, payload.price)
