"""
Logging Setup

Library modules only create loggers; applications call configure_logging()
once at startup.
"""

import logging
from typing import Optional

from pythonjsonlogger import jsonlogger

from .config import Settings, load_settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(settings: Optional[Settings] = None) -> logging.Handler:
    """
    Install a stream handler on the package logger.

    Args:
        settings: Settings to use (loaded from the environment if omitted)

    Returns:
        The installed handler
    """
    settings = settings or load_settings()

    log_handler = logging.StreamHandler()
    if settings.json_logs:
        log_handler.setFormatter(jsonlogger.JsonFormatter(JSON_FORMAT))
    else:
        log_handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    package_logger = logging.getLogger("inventory_validation")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.addHandler(log_handler)
    package_logger.setLevel(settings.log_level)

    return log_handler
