"""Logging setup for the operator CLI.

Library modules only create loggers; handlers are installed here, once,
by the CLI entry point.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, log_level: str | None = None) -> None:
    """Configure root logging with a Rich handler on stderr.

    Parameters
    ----------
    verbose:
        Force DEBUG level (overrides *log_level*).
    log_level:
        Level name (DEBUG, INFO, WARNING, ERROR); unknown names fall back
        to WARNING.
    """
    if verbose:
        level = logging.DEBUG
    elif log_level:
        level = getattr(logging, log_level.upper(), logging.WARNING)
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
