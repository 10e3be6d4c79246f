"""
Logging configuration for the console.

``setup_logging`` configures the root logger with a console handler and
an optional file handler. The console handler writes to stderr so log
records never interleave with result lines printed to stdout.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "udc.console"
FILE_HANDLER_NAME = "udc.file"


def setup_logging(level: str = "WARNING", logfile: Optional[str] = None, force: bool = False) -> None:
    """Configure the root logger.

    If no handlers are attached to the root logger, attach a console
    handler and optionally a file handler. The root logger's level is set
    from ``level``.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``). Case insensitive.
    logfile : Optional[str]
        Path to a file to log messages to. Resolved relative to the current
        working directory. If omitted, no file handler is added.
    force : bool
        Remove and close any handlers already on the root logger, then
        configure it anyway.
    """
    logger = logging.getLogger()
    if force:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()
    elif logger.handlers:
        # Already configured (pytest, repeated CLI runs in one process).
        return

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


def enable_sql_logging(enabled: bool = True) -> None:
    """Log SQL statements through the root logger's handlers.

    Used in place of SQLAlchemy's ``echo=True``, which writes to stdout.
    """
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if enabled else logging.WARNING)
