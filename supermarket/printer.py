"""Send exported receipts to a CUPS printer via lpr."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_CUPS_HINT = (
    "Check that CUPS is installed:\n"
    "  Ubuntu/Debian: sudo apt install cups\n"
    "  Fedora/RHEL:   sudo dnf install cups"
)


@dataclass
class PrinterInfo:
    name: str
    is_default: bool


def _require_command(name: str) -> None:
    if shutil.which(name) is None:
        raise RuntimeError(f"{name} command not found. {_CUPS_HINT}")


def list_printers() -> list[PrinterInfo]:
    """List printers known to CUPS.

    Raises:
        RuntimeError: If lpstat is not available.
    """
    _require_command("lpstat")

    default_name = ""
    try:
        result = subprocess.run(
            ["lpstat", "-d"], capture_output=True, text=True, timeout=10
        )
        # "system default destination: Name"
        if result.returncode == 0 and ":" in result.stdout:
            default_name = result.stdout.strip().split(":")[-1].strip()
    except (subprocess.TimeoutExpired, OSError):
        logger.warning("lpstat -d failed; no default printer")

    printers: list[PrinterInfo] = []
    try:
        result = subprocess.run(
            ["lpstat", "-p"], capture_output=True, text=True, timeout=10
        )
    except (subprocess.TimeoutExpired, OSError):
        logger.warning("lpstat -p failed")
        return printers

    if result.returncode == 0:
        for line in result.stdout.splitlines():
            parts = line.split()
            if len(parts) >= 2 and parts[0] == "printer":
                printers.append(
                    PrinterInfo(name=parts[1], is_default=parts[1] == default_name)
                )
    return printers


class ReceiptPrinter:
    """Prints receipt files on a named or the default printer."""

    def __init__(self, printer_name: str | None = None) -> None:
        self.printer_name = printer_name or None

    @property
    def target(self) -> str:
        return self.printer_name or "default printer"

    def print_file(self, file_path: str | Path) -> None:
        """Queue ``file_path`` for printing.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            RuntimeError: If lpr is not available or rejects the job.
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        _require_command("lpr")

        cmd = ["lpr"]
        if self.printer_name:
            cmd += ["-P", self.printer_name]
        cmd.append(str(file_path))

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=30)
        except subprocess.TimeoutExpired:
            raise RuntimeError("Print job timed out.")
        if result.returncode != 0:
            raise RuntimeError(f"Printing failed: {result.stderr.strip()}")
        logger.info("Sent %s to %s", file_path, self.target)
