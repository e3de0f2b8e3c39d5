"""Centralized logging configuration for cargo-links."""

import logging

from rich.console import Console
from rich.logging import RichHandler

# Loggers that get chatty at DEBUG once -vv is given
THIRD_PARTY_LOGGERS = ("urllib3", "requests")

HANDLER_NAME = "cargolinks"


def setup_logging(verbose: int = 0, color: bool = True) -> None:
    """Configure diagnostics logging on stderr.

    Args:
        verbose: Number of ``-v`` flags. 0 shows warnings and errors, 1 adds
            debug output from cargo-links, 2 or more adds third-party debug output.
        color: Render with ANSI styles
    """
    handler = RichHandler(
        console=Console(stderr=True, color_system="auto" if color else None, highlight=color),
        show_path=False,
        show_time=False,
        markup=False,
    )
    handler.set_name(HANDLER_NAME)
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose >= 2 else logging.WARNING)

    logging.getLogger("cargolinks").setLevel(logging.DEBUG if verbose >= 1 else logging.WARNING)

    third_party_level = logging.DEBUG if verbose >= 2 else logging.WARNING
    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"cargolinks.{name}")
