import json
from typing import Any

import httpx

from app.models.product import Product

STORE_URL = "http://store.test/api.php"


class FakeRemote:
    """
    In-memory stand-in for the remote `api.php` persistence endpoint.
    """

    def __init__(self):
        self.products: list[dict[str, Any]] = []
        self.orders: list[dict[str, Any]] = []
        # Raw body overrides for reads (e.g. a PHP warning page)
        self.products_body: str | None = None
        self.orders_body: str | None = None
        # Actions that answer with HTTP 500
        self.failing: set[str] = set()
        self.down = False
        self.requests: list[tuple[str, str | None]] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        action = request.url.params.get("action")
        self.requests.append((request.method, action))

        if self.down:
            raise httpx.ConnectError("connection refused", request=request)
        if action in self.failing:
            return httpx.Response(500, text="Internal Server Error")

        if action == "products":
            if self.products_body is not None:
                return httpx.Response(200, text=self.products_body)
            return httpx.Response(200, json=self.products)
        if action == "orders":
            if self.orders_body is not None:
                return httpx.Response(200, text=self.orders_body)
            return httpx.Response(200, json=self.orders)
        if action == "add_product":
            self.products.insert(0, json.loads(request.content))
            return httpx.Response(200, json={"success": True})
        if action == "delete_product":
            product_id = request.url.params["id"]
            self.products = [p for p in self.products if p["id"] != product_id]
            return httpx.Response(200, json={"success": True})
        if action == "place_order":
            self.orders.insert(0, json.loads(request.content))
            return httpx.Response(200, json={"success": True})
        return httpx.Response(404, text="Unknown action")


def make_product(**overrides: Any) -> Product:
    data: dict[str, Any] = {
        "id": "P1",
        "name": "Cotton Panjabi",
        "price": 500,
        "sizes": ["S", "M"],
        "stock_by_size": {"S": 0, "M": 3},
        "image": "data:image/png;base64,AAAA",
        "description": "",
        "created_at": 1700000000000,
    }
    data.update(overrides)
    return Product(**data)


def product_json(**overrides: Any) -> dict[str, Any]:
    return make_product(**overrides).model_dump(mode="json", by_alias=True)


def order_json(order_id: str = "ORD-000001") -> dict[str, Any]:
    return {
        "id": order_id,
        "customerName": "Rahim",
        "customerPhone": "01800000000",
        "customerAddress": "Mirpur, Dhaka",
        "items": [
            {"productId": "P1", "name": "Cap", "size": "M", "price": 100, "quantity": 2}
        ],
        "totalAmount": 200,
        "createdAt": 1700000000000,
    }
