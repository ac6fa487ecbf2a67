"""
Logging configuration driven by :class:`Settings`.

``setup_logging`` installs the application's console handler (and a
file handler when ``LOG_FILE`` is set) on the root logger, sets the
level from ``LOG_LEVEL`` and routes uvicorn's loggers through the same
handlers, so server and application messages share one format and one
log file.  Calling it again with new settings replaces the handlers it
installed earlier instead of adding duplicates.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "product_pricing.console"
FILE_HANDLER_NAME = "product_pricing.file"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _replace_handler(logger: logging.Logger, handler: logging.Handler) -> None:
    for existing in list(logger.handlers):
        if existing.get_name() == handler.get_name():
            logger.removeHandler(existing)
            existing.close()
    logger.addHandler(handler)


def setup_logging(settings: Settings) -> None:
    """Configure the root and uvicorn loggers from ``settings``."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    root = logging.getLogger()
    root.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setFormatter(formatter)
    _replace_handler(root, console_handler)

    if settings.log_file:
        file_handler = logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        _replace_handler(root, file_handler)
    else:
        for existing in list(root.handlers):
            if existing.get_name() == FILE_HANDLER_NAME:
                root.removeHandler(existing)
                existing.close()

    # uvicorn installs its own handlers with propagate disabled; drop them
    # so its records reach the root handlers above.
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        for existing in list(uvicorn_logger.handlers):
            uvicorn_logger.removeHandler(existing)
        uvicorn_logger.setLevel(level)
        uvicorn_logger.propagate = True
