import logging
from typing import Optional, Union

from subscription_auditor.core.config import settings

PACKAGE_LOGGER = "subscription_auditor"


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Apply the configured log level to the package logger.

    Handlers are left to the host application; the library only adjusts the
    level so that ``logging.basicConfig`` (or any other handler setup) picks up
    the auditor's messages at the expected verbosity.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    resolved = level if level is not None else settings.LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.strip().upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO
    logger.setLevel(resolved)
    return logger
