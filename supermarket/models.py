"""Data models for catalog products and receipt line items."""

from __future__ import annotations

from dataclasses import dataclass, replace


def format_number(value: float) -> str:
    """Render a number the way the export files expect.

    Integral values drop the fractional part (``2.0`` -> ``2``), everything
    else is shown with up to six significant digits.
    """
    return f"{value:g}"


@dataclass
class Product:
    """A catalog entry stored in the inventory."""

    id: int
    name: str
    quantity: int = 0
    price: float = 0.0

    def display(self) -> str:
        """Human-readable line used by the inventory listing."""
        return (
            f"ID: {self.id} | Name: {self.name} | "
            f"Qty: {self.quantity} | Price: {format_number(self.price)}"
        )

    def file_line(self) -> str:
        """Space separated ``id name quantity price`` record for exports."""
        return f"{self.id} {self.name} {self.quantity} {format_number(self.price)}"

    def copy(self, **changes: object) -> Product:
        """Return an independent copy, optionally with fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class ReceiptLine:
    """A sold item as recorded on the receipt.

    Holds a copy of the name and unit price at the time of sale, not a
    reference to the catalog product.
    """

    name: str
    quantity: int
    unit_price: float

    @property
    def line_total(self) -> float:
        """Quantity times unit price for this line."""
        return self.quantity * self.unit_price

    def render(self) -> str:
        """Receipt line such as ``Milk x4 @ 2.5 = 10``."""
        return (
            f"{self.name} x{self.quantity} @ {format_number(self.unit_price)}"
            f" = {format_number(self.line_total)}"
        )
