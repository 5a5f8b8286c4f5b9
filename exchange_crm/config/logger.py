""" Logging setup for the whole application... """

# Python Packages
import logging

# Constants
from ..base import constants


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"





def configure_logging(level: str = None):
    """
    Install a single stream handler on the package logger

    Safe to call more than once (tests build several apps).
    """

    logger = logging.getLogger("exchange_crm")
    logger.setLevel((level or constants.LOG_LEVEL).upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
