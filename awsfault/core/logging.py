# awsfault/core/logging.py
import logging
import sys

from .config import settings

LOG_FORMAT = "%(levelname)s - %(asctime)s - %(name)s - %(module)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configures the package logger from settings. Safe to call more than once;
    existing handlers are replaced.
    """
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger("awsfault")
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    # botocore is chatty at DEBUG
    logging.getLogger("botocore").setLevel(logging.WARNING if log_level < logging.WARNING else log_level)

    root_logger.debug("Logging configured at %s", level_name)
    return root_logger
