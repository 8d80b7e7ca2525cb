"""Console logging setup for the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Route ``mo2_launch`` log records to stderr through rich."""

    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("mo2_launch")
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger
