"""
Logging setup for the auth service.

All modules log through named children of the "expense_auth" logger,
e.g. logging.getLogger("expense_auth.routers.auth"), so a single
handler configured here covers the whole service.
"""

import logging
import sys


ROOT_LOGGER_NAME = "expense_auth"

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the service logger hierarchy.

    Installs a stdout handler on the root service logger the first time
    it is called; later calls only update the level.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)

    Returns:
        The root "expense_auth" logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
