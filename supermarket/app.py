"""Top-level application loop that selects a role menu."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import SupermarketConfig
from .console import Console
from .inventory import Inventory, StockLevel
from .menu import ROLES, Session, run_menu, stock_message
from .models import Product
from .printer import ReceiptPrinter
from .receipt import Receipt

logger = logging.getLogger(__name__)

_BANNER = [
    "==============================",
    "   SUPERMARKET LOGIN MENU",
    "==============================",
    "1. Admin",
    "2. Inventory Manager",
    "3. Cashier",
    "4. Exit",
    "------------------------------",
]
_EXIT_CHOICE = 4


class SupermarketApp:
    """Owns the inventory and receipt and hands them to each role menu."""

    def __init__(
        self,
        config: SupermarketConfig | None = None,
        console: Console | None = None,
    ) -> None:
        config = config or SupermarketConfig()
        self.console = console or Console(clear_screen=config.console.clear_screen)

        printer = None
        if config.printer.enabled:
            printer = ReceiptPrinter(config.printer.printer_name)

        self.session = Session(
            inventory=Inventory(
                max_quantity=config.inventory.max_quantity,
                low_stock_threshold=config.inventory.low_stock_threshold,
                listener=self._on_stock_level,
            ),
            receipt=Receipt(),
            export_dir=Path(config.export.directory).expanduser(),
            printer=printer,
        )

    def _on_stock_level(self, level: StockLevel, product: Product) -> None:
        self.console.say(stock_message(level, product))

    def run(self) -> None:
        """Show the login menu until the user exits or input ends."""
        while True:
            self.console.clear()
            for line in _BANNER:
                self.console.say(line)
            try:
                choice = self.console.ask_int("Enter choice: ")
            except EOFError:
                break

            if choice == _EXIT_CHOICE:
                break
            if 1 <= choice <= len(ROLES):
                run_menu(ROLES[choice - 1], self.session, self.console)
                continue

            self.console.say(" X Invalid choice.")
            try:
                self.console.pause()
            except EOFError:
                break

        self.console.say("Goodbye!")
        logger.info("Application closed")
