"""
Logging for the subnetkit command line.

Everything hangs off the "subnetkit" logger. Messages go to stderr so that
command output on stdout stays machine readable; a rotating log file can be
added on request and always records at DEBUG.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

PACKAGE_LOGGER = "subnetkit"
LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 3

CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d %(message)s"


def setup_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Install stderr (and optional file) handlers on the package logger.

    Calling it again replaces the handlers from the previous call.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    # the logger itself must pass DEBUG records through to the file handler
    logger.setLevel(logging.DEBUG if log_file else numeric_level)
    logger.propagate = False
    return logger


def configure_logging(debug: bool = False, log_file: str | None = None, level: str = "INFO") -> logging.Logger:
    """Set up logging from command line flags; `debug` overrides `level`."""
    return setup_logging(level="DEBUG" if debug else level, log_file=log_file)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
