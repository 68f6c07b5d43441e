"""Role menus: one dispatcher driven by per-role command sets."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .console import Console
from .errors import ExportError, SupermarketError
from .exporter import export_filename
from .inventory import Inventory, StockLevel
from .models import Product
from .printer import ReceiptPrinter
from .receipt import Receipt

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """State shared by every role menu for the lifetime of the app."""

    inventory: Inventory
    receipt: Receipt
    export_dir: Path = Path(".")
    printer: ReceiptPrinter | None = None


Handler = Callable[[Session, Console], None]


@dataclass(frozen=True)
class Command:
    label: str
    handler: Handler | None


@dataclass(frozen=True)
class Role:
    """A named, ordered set of command tokens.

    Commands are numbered from 1 in tuple order; the last entry is Back.
    """

    key: str
    title: str
    commands: tuple[str, ...]

    def command_for(self, choice: int) -> str | None:
        if 1 <= choice <= len(self.commands):
            return self.commands[choice - 1]
        return None


def stock_message(level: StockLevel, product: Product) -> str:
    match level:
        case StockLevel.EMPTY:
            return f" X Product '{product.name}' is now EMPTY!"
        case StockLevel.LOW:
            return f"  Product '{product.name}' is SHORT and needs refilling!"
        case StockLevel.FULL:
            return f" Product '{product.name}' is FULL."


def _insert(session: Session, console: Console) -> None:
    console.say("=== INSERT PRODUCT ===")
    product = console.ask_product()
    session.inventory.insert_product(product)
    console.say("Product inserted successfully.")


def _delete(session: Session, console: Console) -> None:
    console.say("=== DELETE PRODUCT ===")
    product_id = console.ask_int("Enter product ID to delete: ")
    session.inventory.delete_product(product_id)
    console.say("Product deleted successfully.")


def _restock(session: Session, console: Console) -> None:
    console.say("=== RESTOCK PRODUCT ===")
    product_id = console.ask_int("Enter product ID: ")
    amount = console.ask_int("Enter amount to restock: ")
    quantity = session.inventory.restock_product(product_id, amount)
    console.say(f"Restocked successfully. Current quantity: {quantity}")


def _sell(session: Session, console: Console) -> None:
    console.say("=== SELL PRODUCT ===")
    product_id = console.ask_int("Enter product ID: ")
    amount = console.ask_int("Enter quantity to sell: ")
    sold = session.inventory.sell_product(product_id, amount)
    session.receipt.add_item(sold.name, sold.quantity, sold.price)
    console.say("Sale successful.")


def _show(session: Session, console: Console) -> None:
    console.say("\n=== INVENTORY STATUS ===")
    empty = True
    for product in session.inventory.list_products():
        console.say(product.display())
        empty = False
    if empty:
        console.say("No products.")


def _export_inventory(session: Session, console: Console) -> None:
    path = export_filename("inventory", session.export_dir)
    try:
        session.inventory.export_to_file(path)
    except ExportError:
        console.say(" X Failed to export inventory.")
        return
    console.say(f"Inventory exported to {path}")


def _export_receipt(session: Session, console: Console) -> None:
    if session.receipt.is_empty():
        console.say(" X No items in receipt to export.")
        return
    path = export_filename("receipt", session.export_dir)
    try:
        session.receipt.export_to_file(path)
    except ExportError:
        console.say(" X Failed to export receipt.")
        return
    console.say(f"Receipt exported to {path}")

    if session.printer is not None:
        try:
            session.printer.print_file(path)
            console.say(f"Receipt sent to {session.printer.target}")
        except (RuntimeError, FileNotFoundError) as e:
            logger.info("Printing %s failed: %s", path, e)
            console.say(f" X {e}")


COMMANDS: dict[str, Command] = {
    "insert": Command("Insert Product", _insert),
    "delete": Command("Delete Product", _delete),
    "restock": Command("Restock", _restock),
    "sell": Command("Sell Product", _sell),
    "show": Command("Show Inventory", _show),
    "export-inventory": Command("Export Inventory", _export_inventory),
    "export-receipt": Command("Export Receipt", _export_receipt),
    "back": Command("Back", None),
}

ADMIN = Role(
    key="admin",
    title="ADMIN MENU",
    commands=(
        "insert",
        "delete",
        "restock",
        "sell",
        "show",
        "export-inventory",
        "export-receipt",
        "back",
    ),
)

INVENTORY_MANAGER = Role(
    key="manager",
    title="INVENTORY MANAGER MENU",
    commands=("insert", "delete", "restock", "show", "export-inventory", "back"),
)

CASHIER = Role(
    key="cashier",
    title="CASHIER MENU",
    commands=("sell", "show", "export-receipt", "back"),
)

ROLES: tuple[Role, ...] = (ADMIN, INVENTORY_MANAGER, CASHIER)


def dispatch(token: str, session: Session, console: Console) -> bool:
    """Run one command and report whether it succeeded.

    Errors from the inventory and receipt are printed and swallowed here
    so the menu keeps running.
    """
    handler = COMMANDS[token].handler
    if handler is None:
        return True
    try:
        handler(session, console)
    except SupermarketError as e:
        logger.info("Command %s failed: %s", token, e)
        console.say(f" X {e}")
        return False
    return True


def render_menu(role: Role) -> list[str]:
    lines = [f"\n=== {role.title} ==="]
    for number, token in enumerate(role.commands, start=1):
        lines.append(f"{number}. {COMMANDS[token].label}")
    return lines


def run_menu(role: Role, session: Session, console: Console) -> None:
    """Loop over ``role``'s commands until Back or end of input."""
    logger.info("Entering %s menu", role.key)
    try:
        while True:
            console.clear()
            for line in render_menu(role):
                console.say(line)
            choice = console.ask_int("Choice: ")
            token = role.command_for(choice)
            if token == "back":
                break

            console.clear()
            if token is None:
                console.say(" X Invalid choice.")
            else:
                dispatch(token, session, console)
            console.pause()
    except EOFError:
        logger.info("Input closed in %s menu", role.key)
    logger.info("Leaving %s menu", role.key)
