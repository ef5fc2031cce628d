"""Logging setup for Dragon Flight."""

from __future__ import annotations

import logging
import sys
from datetime import datetime


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        name = record.name.replace("dragon_flight.", "")
        line = f"{ts} [{record.levelname[0]}] {name}: {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(level: str = "info") -> None:
    """Configure the dragon_flight root logger."""
    root = logging.getLogger("dragon_flight")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    root.addHandler(console)
    root.propagate = False
