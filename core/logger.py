"""
Logger setup

Configures named loggers from LoggingConfig. Safe to call repeatedly:
handlers are only attached once per logger.
"""

import logging
from typing import Optional

from core.config.logging_config import LoggingConfig


def setup_service_logger(
    name: str,
    config: Optional[LoggingConfig] = None
) -> logging.Logger:
    """
    Create or fetch a configured logger

    Args:
        name: Logger name (usually the client or module name)
        config: Logging settings, defaults to LoggingConfig.from_env()

    Returns:
        Configured logging.Logger
    """
    config = config or LoggingConfig.from_env()
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))

    if getattr(logger, "_album_client_configured", False):
        return logger

    formatter = logging.Formatter(config.log_format)

    if config.enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    logger._album_client_configured = True
    return logger


__all__ = ["setup_service_logger"]
