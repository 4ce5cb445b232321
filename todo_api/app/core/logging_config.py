"""
Logging configuration for the Todo API.

Only the ``todo_api`` logger hierarchy is configured: the store, seed
loader and application factory all log through module loggers below
it.  The root logger is left to uvicorn, which configures it and the
``uvicorn.*`` loggers on its own.
"""

import logging
from pathlib import Path
from typing import Optional


APP_LOGGER = "todo_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure and return the ``todo_api`` logger.

    Handlers are attached on the first call only; later calls (tests,
    several ``create_app`` invocations) just apply the new level.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file that receives the service's log lines in
        addition to the console.  If omitted or empty, no file handler
        is added.
    """
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger

    # Our handlers own these records; don't pass them on to root.
    logger.propagate = False
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    return logger
