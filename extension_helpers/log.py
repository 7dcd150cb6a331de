"""Logging setup for the command-line interface.

Library modules only create module-level loggers; handlers are installed here,
once, by the CLI.
"""
from __future__ import annotations

import logging

from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> None:
    """Route log records through a rich handler at ``level``.

    Args:
        level: Level name such as ``DEBUG`` or ``INFO``.
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, markup=False)],
    )
