"""
Unit Test Layer Configuration

Structure:
    tests/unit/
    ├── campaign/    Request builders, state model
    └── shared/      Configuration and logging

Usage:
    pytest tests/unit -v                 # All unit tests
    pytest tests/unit -m unit -v         # By marker
"""
import os
import sys

import pytest

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-mark everything under tests/unit as a unit test"""
    for item in items:
        if "/unit/" in str(item.path):
            item.add_marker(pytest.mark.unit)
