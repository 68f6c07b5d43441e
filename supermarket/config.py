"""TOML configuration loader for the supermarket console."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .inventory import LOW_STOCK_THRESHOLD, MAX_QUANTITY

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


@dataclass
class InventoryConfig:
    max_quantity: int = MAX_QUANTITY
    low_stock_threshold: int = LOW_STOCK_THRESHOLD


@dataclass
class ExportConfig:
    directory: str = "."


@dataclass
class PrinterConfig:
    enabled: bool = False
    printer_name: str = ""


@dataclass
class ConsoleConfig:
    clear_screen: bool = False


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    file: str = ""


@dataclass
class SupermarketConfig:
    inventory: InventoryConfig = field(default_factory=InventoryConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    printer: PrinterConfig = field(default_factory=PrinterConfig)
    console: ConsoleConfig = field(default_factory=ConsoleConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> SupermarketConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    Values missing from the file can be supplied through
    ``SUPERMARKET_EXPORT_DIR``, ``SUPERMARKET_PRINTER`` and
    ``SUPERMARKET_LOG_LEVEL``.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    inv = raw.get("inventory", {})
    exp = raw.get("export", {})
    prn = raw.get("printer", {})
    con = raw.get("console", {})
    log = raw.get("logging", {})

    # Resolve values: config file → environment variable → default
    export_dir = exp.get("directory") or os.environ.get(
        "SUPERMARKET_EXPORT_DIR", "."
    )
    env_printer = os.environ.get("SUPERMARKET_PRINTER", "")
    printer_name = prn.get("printer_name", "") or env_printer
    log_level = log.get("level") or os.environ.get(
        "SUPERMARKET_LOG_LEVEL", "WARNING"
    )

    return SupermarketConfig(
        inventory=InventoryConfig(
            max_quantity=inv.get("max_quantity", MAX_QUANTITY),
            low_stock_threshold=inv.get("low_stock_threshold", LOW_STOCK_THRESHOLD),
        ),
        export=ExportConfig(directory=export_dir),
        printer=PrinterConfig(
            enabled=prn.get("enabled", bool(env_printer)),
            printer_name=printer_name,
        ),
        console=ConsoleConfig(
            clear_screen=con.get("clear_screen", False),
        ),
        logging=LoggingConfig(
            level=str(log_level).upper(),
            file=log.get("file", ""),
        ),
    )
