"""Logging setup for tally.

The console belongs to the conversation with the user, so only warnings
from tally itself and errors from anything else reach stderr. The log
file gets everything at the configured level.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """Keep routine log records out of the interactive console."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("tally."):
            return record.levelno >= logging.WARNING
        return record.levelno >= logging.ERROR


def setup_logging(*, level: str = "INFO", log_file: str | Path | None = None) -> None:
    """Configure the root logger.

    Call this once, before the first task is loaded.

    Args:
        level: Level name for the log file.
        log_file: Where to write the full log; no file handler if None.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.WARNING)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(getattr(logging, level.upper(), logging.INFO))
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
