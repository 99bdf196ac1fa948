# app/repositories/product_repo.py
import logging

from pydantic import ValidationError

from app.core.errors import InventoryError, ParseFailed
from app.core.store_client import StoreClient
from app.models.product import Product

logger = logging.getLogger(__name__)


class ProductRepository:
    """
    In-memory catalog, synced with the remote persistence service.

    - load() replaces the whole catalog and fails closed: on any fetch or
      parse failure the catalog is emptied, never left half-filled or stale.
    - add() is optimistic: the product is shown first, then written; a
      rejected write restores the previous catalog.
    - remove() only touches memory after the remote delete succeeded.
    - A load response older than the last applied one is discarded.
    """

    def __init__(self, store: StoreClient):
        self.store = store
        self.products: list[Product] = []
        self._requested = 0
        self._applied = 0

    # ----- Reads -----

    def list_all(self) -> list[Product]:
        return list(self.products)

    def get_by_id(self, product_id: str) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def search(self, query: str) -> list[Product]:
        needle = query.lower()
        return [p for p in self.products if needle in p.name.lower()]

    # ----- Sync -----

    def _is_stale(self, token: int) -> bool:
        if token < self._applied:
            logger.info("Discarding stale catalog response (token %s < %s)", token, self._applied)
            return True
        return False

    async def load(self) -> list[Product]:
        self._requested += 1
        token = self._requested

        try:
            raw = await self.store.fetch_products()
            if not isinstance(raw, list):
                raise ParseFailed("Product list is not a JSON array")
            try:
                products = [Product.model_validate(item) for item in raw]
            except ValidationError as e:
                raise ParseFailed(f"Invalid product data: {e.error_count()} error(s)")
        except InventoryError:
            if not self._is_stale(token):
                self.products = []
                self._applied = token
            raise

        if not self._is_stale(token):
            self.products = products
            self._applied = token
        return self.list_all()

    # ----- Writes -----

    async def add(self, product: Product) -> Product:
        snapshot = self.products
        self.products = [product] + [p for p in snapshot if p.id != product.id]
        try:
            await self.store.add_product(product.model_dump(mode="json", by_alias=True))
        except InventoryError:
            self.products = snapshot
            raise
        return product

    async def remove(self, product_id: str) -> bool:
        """
        Delete remotely, then locally. Returns whether a local entry was removed.
        """
        await self.store.delete_product(product_id)
        before = len(self.products)
        self.products = [p for p in self.products if p.id != product_id]
        return len(self.products) != before
