"""In-memory stock ledger keyed by product ID."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterator
from datetime import datetime
from pathlib import Path

from .errors import (
    DuplicateIDError,
    InsufficientStockError,
    ProductNotFoundError,
    QuantityOutOfRangeError,
)
from .exporter import now_timestamp, write_export
from .models import Product

logger = logging.getLogger(__name__)

MAX_QUANTITY = 100
LOW_STOCK_THRESHOLD = 20


class StockLevel(enum.Enum):
    EMPTY = "empty"
    LOW = "low"
    FULL = "full"


StockListener = Callable[[StockLevel, Product], None]


def stock_level(
    quantity: int,
    *,
    max_quantity: int = MAX_QUANTITY,
    low_threshold: int = LOW_STOCK_THRESHOLD,
) -> StockLevel | None:
    """Classify a remaining quantity after a sale.

    Returns None when the quantity needs no notification.
    """
    if quantity == 0:
        return StockLevel.EMPTY
    if quantity < low_threshold:
        return StockLevel.LOW
    if quantity == max_quantity:
        return StockLevel.FULL
    return None


class Inventory:
    """Owns the product catalog and enforces the stock limits.

    Products are stored by value: callers get copies back, so mutating a
    returned Product never changes the ledger.
    """

    def __init__(
        self,
        *,
        max_quantity: int = MAX_QUANTITY,
        low_stock_threshold: int = LOW_STOCK_THRESHOLD,
        listener: StockListener | None = None,
    ) -> None:
        self._products: dict[int, Product] = {}
        self.max_quantity = max_quantity
        self.low_stock_threshold = low_stock_threshold
        self._listener = listener

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    def product_exists(self, product_id: int) -> bool:
        return product_id in self._products

    def get_product(self, product_id: int) -> Product:
        """Return a copy of the stored product.

        Raises:
            ProductNotFoundError: If no product has this ID.
        """
        return self._require(product_id).copy()

    def _require(self, product_id: int) -> Product:
        try:
            return self._products[product_id]
        except KeyError:
            logger.info("Product %s not found", product_id)
            raise ProductNotFoundError(product_id) from None

    def insert_product(self, product: Product) -> None:
        """Add a new product to the catalog.

        Raises:
            DuplicateIDError: If the ID is already in use.
            QuantityOutOfRangeError: If the initial quantity exceeds the maximum.
        """
        if product.id in self._products:
            logger.info("Rejected insert of duplicate ID %s", product.id)
            raise DuplicateIDError(product.id)
        # Negative initial quantities are accepted as-is.
        if product.quantity > self.max_quantity:
            logger.info(
                "Rejected insert of ID %s with quantity %s",
                product.id,
                product.quantity,
            )
            raise QuantityOutOfRangeError(
                f"Quantity cannot exceed {self.max_quantity}.",
                limit=self.max_quantity,
            )
        self._products[product.id] = product.copy()
        logger.info("Inserted product %s (%s)", product.id, product.name)

    def delete_product(self, product_id: int) -> None:
        """Remove a product.

        Raises:
            ProductNotFoundError: If no product has this ID.
        """
        self._require(product_id)
        del self._products[product_id]
        logger.info("Deleted product %s", product_id)

    def restock_product(self, product_id: int, amount: int) -> int:
        """Add ``amount`` units to a product and return the new quantity.

        Negative amounts are not rejected and lower the stock.

        Raises:
            ProductNotFoundError: If no product has this ID.
            QuantityOutOfRangeError: If the result would exceed the maximum.
        """
        product = self._require(product_id)
        if product.quantity + amount > self.max_quantity:
            logger.info(
                "Rejected restock of %s by %s (current %s)",
                product_id,
                amount,
                product.quantity,
            )
            raise QuantityOutOfRangeError(
                f"Cannot restock beyond {self.max_quantity}.",
                limit=self.max_quantity,
            )
        product.quantity += amount
        logger.info("Restocked product %s to %s", product_id, product.quantity)
        return product.quantity

    def sell_product(self, product_id: int, amount: int) -> Product:
        """Take ``amount`` units out of stock.

        Returns:
            A snapshot of the product whose quantity is the amount sold.

        Raises:
            ProductNotFoundError: If no product has this ID.
            InsufficientStockError: If fewer than ``amount`` units are in stock.
        """
        product = self._require(product_id)
        if product.quantity < amount:
            logger.info(
                "Rejected sale of %s x%s (in stock %s)",
                product_id,
                amount,
                product.quantity,
            )
            raise InsufficientStockError(product_id, product.quantity, amount)
        product.quantity -= amount
        sold = product.copy(quantity=amount)
        logger.info(
            "Sold %s x%s, %s remaining", product_id, amount, product.quantity
        )

        level = stock_level(
            product.quantity,
            max_quantity=self.max_quantity,
            low_threshold=self.low_stock_threshold,
        )
        if level is not None:
            self._notify(level, product)
        return sold

    def _notify(self, level: StockLevel, product: Product) -> None:
        logger.info(
            "Product %s stock is %s (%s left)",
            product.id,
            level.value,
            product.quantity,
        )
        if self._listener is not None:
            self._listener(level, product.copy())

    def list_products(self) -> Iterator[Product]:
        """Iterate over copies of the products in ascending ID order."""
        for product_id in sorted(self._products):
            yield self._products[product_id].copy()

    def export_snapshot(self, now: datetime | None = None) -> str:
        lines = [
            "=== INVENTORY EXPORT ===",
            f"Timestamp: {now_timestamp(now)}",
            "",
        ]
        lines.extend(p.file_line() for p in self.list_products())
        return "\n".join(lines) + "\n"

    def export_to_file(self, path: str | Path, now: datetime | None = None) -> Path:
        """Write the snapshot to ``path``.

        Raises:
            ExportError: If the file could not be written.
        """
        return write_export(self.export_snapshot(now), path)
