"""Shared fixtures."""

import pytest

from validated_primitives.config import reset_config
from validated_primitives.types import CountryCode


@pytest.fixture(autouse=True)
def _default_config():
    """Every test starts and ends with the default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def uk():
    return CountryCode.UNITED_KINGDOM


@pytest.fixture
def us():
    return CountryCode.UNITED_STATES
