"""Logging utilities."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

# Third-party loggers that are chatty at INFO during downloads.
NOISY_LOGGERS = ("urllib3", "charset_normalizer")


def configure_logging(level: str = "INFO", *, rich_tracebacks: bool = False) -> None:
    """Route log records to stderr so stdout only carries the report."""
    console = Console(stderr=True)
    handler = RichHandler(console=console, rich_tracebacks=rich_tracebacks, markup=False, show_path=False)
    logging.basicConfig(level=level.upper(), format="%(message)s", handlers=[handler], force=True)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]
