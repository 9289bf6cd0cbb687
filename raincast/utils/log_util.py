"""
Logging helper shared by every raincast module.

Usage:
    from raincast.utils.log_util import app_logger

    logger = app_logger(__name__)
"""

import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL_ENV = "RAINCAST_LOG_LEVEL"


def app_logger(name: str) -> logging.Logger:
    """
    Return a module logger with a single stream handler attached.

    The level is read from the RAINCAST_LOG_LEVEL environment variable and
    falls back to INFO for unknown names.

    :param name: Logger name, normally the calling module's __name__
    :return: Configured logging.Logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    return logger
