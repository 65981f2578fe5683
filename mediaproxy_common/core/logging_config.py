"""
Logging setup for applications embedding the package
"""

import logging
from typing import Optional

from .config import Settings, settings as default_settings


def configure_logging(settings: Optional[Settings] = None, force: bool = False) -> logging.Logger:
    """
    Configure root logging from settings.

    Args:
        settings: Settings to read LOG_LEVEL and LOG_FORMAT from, defaults to the module instance
        force: Replace handlers already installed on the root logger

    Returns:
        The package logger
    """
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format=settings.LOG_FORMAT,
        force=force
    )
    logger = logging.getLogger("mediaproxy_common")
    logger.debug(f"Logging configured for {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")
    return logger
