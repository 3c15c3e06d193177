"""Logging for Folio.

Library modules log under the ``folio`` namespace through ``get_logger`` and
never install handlers; only the CLI calls ``setup_logging``. The console
handler stays at WARNING so log lines do not interleave with the rich build
report.
"""

import logging
import sys
from pathlib import Path
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

NAMESPACE = "folio"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# httpx logs every data fetch and image probe at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(
    level: LogLevel = "INFO",
    log_file: Path | None = None,
    console_level: LogLevel = "WARNING",
) -> logging.Logger:
    """Install console (and optionally file) handlers on the ``folio`` logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        level: Level of the ``folio`` logger itself
        log_file: Also write every record to this file
        console_level: Threshold for the stderr handler

    Returns:
        The ``folio`` logger
    """
    logger = logging.getLogger(NAMESPACE)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger inside the ``folio`` namespace.

    Module ``__name__`` values are already namespaced and are used as-is.
    """
    if name == NAMESPACE or name.startswith(f"{NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{NAMESPACE}.{name}")
