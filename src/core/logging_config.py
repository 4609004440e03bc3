"""Logging configuration.

Records go to stderr through Rich so that stdout carries only the game
protocol. Usage:

    from core.logging_config import setup_logging

    setup_logging("DEBUG")
    logger = logging.getLogger(__name__)
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGERS = ("cli", "core", "adapters")


def setup_logging(level: str = "WARNING", log_file: Path | str | None = None) -> None:
    """Configure the project loggers.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path; records are also appended there.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    handlers: list[logging.Handler] = []

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(numeric_level)
    handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        handlers.append(file_handler)

    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(numeric_level)
        # Avoid duplicate records when the CLI is invoked repeatedly in-process.
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        for handler in handlers:
            logger.addHandler(handler)

    logging.getLogger("core").debug("Logging initialized at %s level", level.upper())
