"""Logging setup for library consumers.

Importing the package never touches the root logger; call configure_logging()
to get console output from the cooking_converter loggers.
"""

import logging
import sys
from typing import Optional

from .settings import Settings, get_settings

LOGGER_NAME = "cooking_converter"


class ConsoleHandler(logging.StreamHandler):
    """stdout handler installed by configure_logging."""

    def __init__(self):
        super().__init__(sys.stdout)


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    settings = settings or get_settings()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, settings.log_level))

    # Replace our own handler on repeat calls
    for handler in list(logger.handlers):
        if isinstance(handler, ConsoleHandler):
            logger.removeHandler(handler)

    handler = ConsoleHandler()
    handler.setFormatter(logging.Formatter(settings.log_format, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    return logger
