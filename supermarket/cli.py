"""CLI entry point for the supermarket console."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from .app import SupermarketApp
from .config import SupermarketConfig, load_config
from .printer import list_printers


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="supermarket",
        description="Supermarket inventory and point-of-sale console",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to a TOML configuration file",
    )
    parser.add_argument(
        "--export-dir",
        type=str,
        default=None,
        help="Directory for inventory and receipt exports",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default from config, WARNING)",
    )

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("run", help="Start the interactive role menus (default)")
    sub.add_parser("printers", help="List available printers")

    args = parser.parse_args(argv)

    load_dotenv()
    config = load_config(args.config)
    if args.export_dir:
        config.export.directory = args.export_dir
    if args.log_level:
        config.logging.level = args.log_level
    _configure_logging(config)

    match args.command:
        case "printers":
            _cmd_printers()
        case _:
            _cmd_run(config)


def _configure_logging(config: SupermarketConfig) -> None:
    kwargs = {}
    if config.logging.file:
        kwargs["filename"] = config.logging.file
    logging.basicConfig(
        level=getattr(logging, config.logging.level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        **kwargs,
    )


def _cmd_run(config: SupermarketConfig) -> None:
    app = SupermarketApp(config)
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nInterrupted by user. Exiting.")


def _cmd_printers() -> None:
    try:
        printers = list_printers()
    except RuntimeError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    if not printers:
        print("No printers found.")
        return
    print(f"Available printers: {len(printers)}")
    for p in printers:
        default_mark = " (default)" if p.is_default else ""
        print(f"  {p.name}{default_mark}")


if __name__ == "__main__":
    main()
