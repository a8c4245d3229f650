#!/usr/bin/env python3
"""Modular configuration system for the campaign client

Configuration hierarchy:
- campaign_config: Campaign server, property key and identity
- logging_config: Logging configuration
"""
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .campaign_config import CampaignConfig
from .logging_config import LoggingConfig

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "staging": "deployment/environments/staging.env",
    "production": "deployment/environments/production.env",
}
env_file = env_files.get(env, "deployment/environments/dev.env")
load_dotenv(env_file, override=False)


@dataclass
class CampaignSettings:
    """Aggregate of all configuration sections"""
    campaign: CampaignConfig = field(default_factory=CampaignConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> 'CampaignSettings':
        return cls(
            campaign=CampaignConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )


# Create global settings instance
settings = CampaignSettings.from_env()


def get_settings() -> CampaignSettings:
    """Get global settings instance"""
    return settings


def reload_settings() -> CampaignSettings:
    """Reload settings from environment"""
    global settings
    settings = CampaignSettings.from_env()
    return settings


__all__ = [
    'CampaignSettings',
    'get_settings',
    'reload_settings',
    'settings',
    'CampaignConfig',
    'LoggingConfig',
]
