"""
Root pytest configuration and fixtures for resttools.

Provides common fixtures shared by the unit tests.
"""

import logging

import pytest


@pytest.fixture
def base_url():
    """Test base URL."""
    return "https://api.test.example.com"


@pytest.fixture
def token():
    """Test bearer token."""
    return "test-token-12345"


@pytest.fixture(autouse=True)
def _debug_logging(caplog):
    """Capture library debug records so a failing test shows the request trail."""
    caplog.set_level(logging.DEBUG, logger="resttools")
