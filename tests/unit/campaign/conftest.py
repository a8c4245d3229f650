"""
Unit Test Fixtures for Campaign Client

Provides state fixtures and recording log sinks.
Uses CampaignRequestTestDataFactory from the data contract.
"""

import pytest
from typing import List, Tuple

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from campaign_client.models import CampaignState
from tests.contracts.campaign.data_contract import CampaignRequestTestDataFactory


# ====================
# Log Sinks
# ====================


class RecordingLogSink:
    """Log sink that keeps every (tag, message) pair"""

    def __init__(self):
        self.records: List[Tuple[str, str]] = []

    def error(self, tag: str, message: str) -> None:
        self.records.append((tag, message))

    @property
    def messages(self) -> List[str]:
        return [message for _, message in self.records]


class FailingLogSink:
    """Log sink that always raises"""

    def __init__(self):
        self.calls = 0

    def error(self, tag: str, message: str) -> None:
        self.calls += 1
        raise RuntimeError("sink unavailable")


# ====================
# Fixtures
# ====================


@pytest.fixture
def factory() -> CampaignRequestTestDataFactory:
    """Provide test data factory"""
    return CampaignRequestTestDataFactory()


@pytest.fixture
def log_sink() -> RecordingLogSink:
    """Provide a recording log sink"""
    return RecordingLogSink()


@pytest.fixture
def failing_sink() -> FailingLogSink:
    """Provide a log sink that raises on every call"""
    return FailingLogSink()


@pytest.fixture
def example_state() -> CampaignState:
    """Campaign state with fixed, documented values"""
    return CampaignState(server="mcamp.example.com", pkey="abc123", ecid="99887766")


@pytest.fixture
def random_state(factory) -> CampaignState:
    """Campaign state with generated values"""
    return factory.make_state()
