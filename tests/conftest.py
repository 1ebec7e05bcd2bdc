"""Root test fixtures shared across all test types.

Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Set APP_ENV to testing before any app imports
os.environ.setdefault("APP_ENV", "testing")
# Tests build their own databases and never migrate on startup
os.environ.setdefault("RUN_MIGRATIONS_ON_STARTUP", "false")
os.environ.setdefault("CARE_TIMEZONE", "UTC")

# ruff: noqa: E402 - Imports must be after env var setup
from datetime import datetime

import pytest

from src.plantcare.core.config import get_settings
from tests.helpers import NOW

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def now() -> datetime:
    """The fixed reference time used across tests."""
    return NOW
