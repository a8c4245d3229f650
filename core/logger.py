#!/usr/bin/env python3
"""
Service logging setup

Configures named loggers from LoggingConfig and provides the default log sink
used by the campaign request builders.
"""
import logging
import sys
from typing import Optional

from core.config.logging_config import LoggingConfig


def setup_service_logger(
    service_name: Optional[str] = None,
    level: Optional[str] = None,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Create (or return) a configured logger for a service.

    Args:
        service_name: Logger name; defaults to config.service_name
        level: Level override, e.g. "DEBUG"; defaults to config.log_level
        config: Logging configuration; loaded from the environment if omitted

    Returns:
        Configured logger
    """
    config = config or LoggingConfig.from_env()
    logger = logging.getLogger(service_name or config.service_name)
    logger.setLevel((level or config.log_level).upper())

    # Avoid duplicate handlers if called more than once
    if logger.handlers:
        return logger

    formatter = logging.Formatter(config.log_format)

    if config.enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


class LoggingSink:
    """Log sink that forwards (tag, message) pairs to a standard logger"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("campaign_client")

    def error(self, tag: str, message: str) -> None:
        self.logger.error(f"[{tag}] {message}")
