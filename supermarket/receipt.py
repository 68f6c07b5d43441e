"""Running sales receipt for the current session."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from .exporter import now_timestamp, write_export
from .models import ReceiptLine, format_number

logger = logging.getLogger(__name__)

_RULE = "-------------------"


class Receipt:
    """Accumulates sold items and their total until cleared."""

    def __init__(self) -> None:
        self._items: list[ReceiptLine] = []
        self._total = 0.0

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> tuple[ReceiptLine, ...]:
        return tuple(self._items)

    @property
    def total(self) -> float:
        return self._total

    def add_item(self, name: str, quantity: int, unit_price: float) -> ReceiptLine:
        """Append a sold line and add its amount to the total.

        Values are taken as given; callers add items only after a
        successful sale.
        """
        line = ReceiptLine(name=name, quantity=quantity, unit_price=unit_price)
        self._items.append(line)
        self._total += quantity * unit_price
        logger.debug("Receipt line added: %s", line.render())
        return line

    def clear(self) -> None:
        self._items.clear()
        self._total = 0.0
        logger.info("Receipt cleared")

    def is_empty(self) -> bool:
        return not self._items

    def export_snapshot(self, now: datetime | None = None) -> str:
        lines = [
            "===== RECEIPT =====",
            f"Timestamp: {now_timestamp(now)}",
            _RULE,
        ]
        lines.extend(item.render() for item in self._items)
        lines += [
            _RULE,
            f"Total: {format_number(self._total)}",
            "===================",
        ]
        return "\n".join(lines) + "\n"

    def export_to_file(self, path: str | Path, now: datetime | None = None) -> Path:
        """Write the receipt to ``path``.

        Raises:
            ExportError: If the file could not be written.
        """
        return write_export(self.export_snapshot(now), path)
