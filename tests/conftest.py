"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - unit/       : Unit tests (pure functions, no I/O)
"""
import os
import sys

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)


# =============================================================================
# Environment Isolation
# =============================================================================

CAMPAIGN_ENV_VARS = (
    "CAMPAIGN_SERVER",
    "CAMPAIGN_PKEY",
    "EXPERIENCE_CLOUD_ID",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FILE",
    "LOG_CONSOLE",
    "SERVICE_NAME",
    "ENV",
    "ENVIRONMENT",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove campaign and logging variables from the environment"""
    for name in CAMPAIGN_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
