"""Logging configuration for openenum.

Modules obtain loggers through :func:`get_logger`; the CLI calls
:func:`setup_logging` once to attach handlers. Library users who never
call it get the standard library's default behaviour.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "openenum"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the openenum namespace.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        Logger instance.
    """
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(
    level: str | int = "WARNING",
    log_file: str | Path | None = None,
) -> logging.Logger:
    """Configure console (and optional file) logging for openenum.

    Console output goes to stderr through rich, so generated code written
    to stdout stays clean. Calling this again replaces the handlers.

    Args:
        level: Level name or number.
        log_file: Optional file receiving plain-text records.

    Returns:
        The configured package root logger.

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    if isinstance(level, str):
        if level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        level = getattr(logging, level.upper())

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    root_logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    return root_logger
