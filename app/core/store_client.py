# app/core/store_client.py
import json
import logging
from typing import Any

import httpx

from app.core.config import get_settings
from app.core.errors import FetchFailed, ParseFailed, RejectedByStore

logger = logging.getLogger(__name__)


class StoreClient:
    """
    Thin async client for the remote persistence service.

    The service exposes a single endpoint driven by an `action` query param:

        GET    <url>?action=products
        GET    <url>?action=orders
        POST   <url>?action=add_product        (JSON product)
        DELETE <url>?action=delete_product&id=<id>
        POST   <url>?action=place_order        (JSON order)

    Error mapping:
      - transport error or non-2xx read  -> FetchFailed
      - body that is not JSON            -> ParseFailed
      - non-2xx write                    -> RejectedByStore

    No retries: every failure is terminal for the triggering operation.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def aclose(self) -> None:
        await self._client.aclose()

    # ---- internal helpers ----

    async def _send(
        self,
        method: str,
        action: str,
        *,
        params: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> httpx.Response:
        query = {"action": action, **(params or {})}
        try:
            return await self._client.request(
                method, self.url, params=query, json=payload
            )
        except httpx.HTTPError as e:
            logger.debug("Store request %s %s failed: %s", method, action, e)
            raise FetchFailed(f"Could not reach the persistence service: {e}")

    async def _read(self, action: str) -> Any:
        res = await self._send("GET", action)
        if not res.is_success:
            raise FetchFailed(f"HTTP Error: {res.status_code}")
        try:
            return json.loads(res.text)
        except ValueError:
            logger.debug("Store action %s returned non-JSON body", action)
            raise ParseFailed(
                f"Action '{action}' did not return valid JSON",
                body=res.text[:200],
            )

    async def _write(
        self,
        method: str,
        action: str,
        *,
        params: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> None:
        res = await self._send(method, action, params=params, payload=payload)
        if not res.is_success:
            logger.warning("Store rejected %s with status %s", action, res.status_code)
            raise RejectedByStore(
                f"Persistence service rejected '{action}' (HTTP {res.status_code})"
            )

    # ---- public operations ----

    async def fetch_products(self) -> Any:
        return await self._read("products")

    async def fetch_orders(self) -> Any:
        return await self._read("orders")

    async def add_product(self, payload: dict[str, Any]) -> None:
        await self._write("POST", "add_product", payload=payload)

    async def delete_product(self, product_id: str) -> None:
        await self._write("DELETE", "delete_product", params={"id": product_id})

    async def place_order(self, payload: dict[str, Any]) -> None:
        await self._write("POST", "place_order", payload=payload)


def create_store_client() -> StoreClient:
    """
    Build a StoreClient from settings.

    Caller owns the client and must `await client.aclose()` on shutdown.
    """
    settings = get_settings()
    return StoreClient(settings.STORE_API_URL, timeout=settings.STORE_API_TIMEOUT)
