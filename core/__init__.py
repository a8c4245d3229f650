#!/usr/bin/env python3
"""
Core Module for the Campaign Client

Shared infrastructure used by the campaign request builders.

COMPONENTS:
    - config/: Environment-driven configuration (campaign backend, logging)
    - logger.py: Service logger setup and the default diagnostic log sink

USAGE:
    from core.config import get_settings
    from core.logger import setup_service_logger, LoggingSink

    settings = get_settings()
    logger = setup_service_logger("campaign_client")
"""

from .config import CampaignSettings, get_settings, reload_settings
from .logger import LoggingSink, setup_service_logger

# Export public API
__all__ = [
    "CampaignSettings",
    "get_settings",
    "reload_settings",
    "LoggingSink",
    "setup_service_logger",
]

__version__ = "1.0.0"
