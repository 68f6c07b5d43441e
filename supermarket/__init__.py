"""Supermarket inventory and point-of-sale console."""

from .app import SupermarketApp
from .config import SupermarketConfig, load_config
from .errors import (
    DuplicateIDError,
    ExportError,
    InsufficientStockError,
    InvalidInputError,
    ProductNotFoundError,
    QuantityOutOfRangeError,
    SupermarketError,
)
from .inventory import Inventory, StockLevel
from .models import Product, ReceiptLine
from .receipt import Receipt

__all__ = [
    "SupermarketApp",
    "SupermarketConfig",
    "load_config",
    "Inventory",
    "StockLevel",
    "Receipt",
    "Product",
    "ReceiptLine",
    "SupermarketError",
    "DuplicateIDError",
    "ProductNotFoundError",
    "QuantityOutOfRangeError",
    "InsufficientStockError",
    "InvalidInputError",
    "ExportError",
]
