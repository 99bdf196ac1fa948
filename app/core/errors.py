# app/core/errors.py
from typing import Any

from fastapi import HTTPException, status


class InventoryError(HTTPException):
    """
    Base class for every failure the inventory core reports.

    Each subclass fixes a status code and a stable `kind`, so callers can
    tell a transport failure from a rejected write without parsing text.
    Raised from services exactly like a plain HTTPException.
    """

    kind: str = "InventoryError"
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Inventory operation failed"

    def __init__(self, message: str | None = None, **extra: Any):
        self.message = message or self.default_message
        detail: dict[str, Any] = {"kind": self.kind, "message": self.message}
        detail.update(extra)
        super().__init__(status_code=type(self).status_code, detail=detail)


# ---- Remote persistence ----


class FetchFailed(InventoryError):
    kind = "FetchFailed"
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Could not reach the persistence service"


class ParseFailed(InventoryError):
    kind = "ParseFailed"
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Persistence service returned malformed data"

    def __init__(self, message: str | None = None, body: str | None = None):
        # Raw body kept for logs only, never sent to clients
        self.body = body
        super().__init__(message)


class RejectedByStore(InventoryError):
    kind = "RejectedByStore"
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Persistence service rejected the write"


# ---- Domain ----


class OutOfStock(InventoryError):
    kind = "OutOfStock"
    status_code = status.HTTP_409_CONFLICT
    default_message = "Product is out of stock in every size"


class MissingField(InventoryError):
    kind = "MissingField"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Customer name, phone and address are required"

    def __init__(self, fields: list[str], message: str | None = None):
        self.fields = fields
        super().__init__(message, fields=fields)


class EmptyCart(InventoryError):
    kind = "EmptyCart"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Cart is empty"


class ProductNotFound(InventoryError):
    kind = "ProductNotFound"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Product not found"


class ConfirmationRequired(InventoryError):
    kind = "ConfirmationRequired"
    status_code = status.HTTP_428_PRECONDITION_REQUIRED
    default_message = "Deleting a product must be confirmed (confirm=true)"
