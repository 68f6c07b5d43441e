"""Exceptions raised by the inventory, receipt and export layers."""

from __future__ import annotations


class SupermarketError(Exception):
    """Base class for every recoverable error in the application."""


class DuplicateIDError(SupermarketError):
    def __init__(self, product_id: int) -> None:
        super().__init__("Product already exists.")
        self.product_id = product_id


class ProductNotFoundError(SupermarketError):
    def __init__(self, product_id: int) -> None:
        super().__init__("Product not found.")
        self.product_id = product_id


class QuantityOutOfRangeError(SupermarketError):
    """Raised when a product's stock would exceed the allowed maximum."""

    def __init__(self, message: str, *, limit: int) -> None:
        super().__init__(message)
        self.limit = limit


class InsufficientStockError(SupermarketError):
    def __init__(self, product_id: int, available: int, requested: int) -> None:
        super().__init__("Not enough stock.")
        self.product_id = product_id
        self.available = available
        self.requested = requested


class InvalidInputError(SupermarketError, ValueError):
    """Raised when a numeric field receives a non-numeric token."""


class ExportError(SupermarketError):
    """Raised when an export document could not be written."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Failed to write {path}.")
        self.path = path
