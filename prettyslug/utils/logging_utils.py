"""
Logging setup for prettyslug

Configures console and optional file logging with the project's log format.
The library itself only creates module loggers; applications that want to see
its output call `configure_logging()` once at startup.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from prettyslug import settings


def configure_logging(
    level: Optional[Union[str, int]] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        level: Log level name or number. Defaults to the `PRETTYSLUG_LOG_LEVEL`
               environment variable (a local `.env` is loaded first), then
               `settings.LOG_LEVEL`.
        log_file: Optional path for an additional file handler. Defaults to
                  `settings.LOG_FILE`.

    Returns:
        The configured root logger.
    """
    if level is None:
        load_dotenv()
        level = os.getenv(settings.LOG_LEVEL_ENV, settings.LOG_LEVEL)
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = []  # Reset any existing handlers

    formatter = logging.Formatter(
        fmt=settings.LOG_FORMAT, datefmt=settings.LOG_DATE_FORMAT
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    log_file = log_file or settings.LOG_FILE
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return root
