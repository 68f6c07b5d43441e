"""Timestamped text exports for the inventory and the receipt."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from .errors import ExportError

logger = logging.getLogger(__name__)

EXPORT_KINDS = ("inventory", "receipt")


def now_timestamp(now: datetime | None = None) -> str:
    """Return a sortable local-time stamp such as ``20250110_143005``."""
    return (now or datetime.now()).strftime("%Y%m%d_%H%M%S")


def export_filename(
    kind: str,
    directory: str | Path = ".",
    now: datetime | None = None,
) -> Path:
    """Build the output path ``<directory>/<kind>_<timestamp>.txt``.

    Raises:
        ValueError: If ``kind`` is not one of the known export kinds.
    """
    if kind not in EXPORT_KINDS:
        raise ValueError(
            f"Unknown export kind: {kind!r} (expected one of {', '.join(EXPORT_KINDS)})"
        )
    return Path(directory).expanduser() / f"{kind}_{now_timestamp(now)}.txt"


def write_export(content: str, path: str | Path) -> Path:
    """Write a whole export document and close the file.

    An existing file with the same name is overwritten.

    Args:
        content: The complete document text.
        path: Destination file.

    Returns:
        Path of the written file.

    Raises:
        ExportError: If the file could not be written.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        logger.debug("Export to %s failed", path, exc_info=True)
        raise ExportError(str(path)) from e
    logger.info("Exported %d bytes to %s", len(content), path)
    return path
