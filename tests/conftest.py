"""Pytest configuration and shared fixtures."""

import pytest

from termcal.config import reset_calendar_config
from termcal.registry import reset_registry


@pytest.fixture(autouse=True)
def reset_termcal_state():
    """Reset the default registry and calendar config around each test.

    Both are module-level singletons that persist across tests.
    """
    reset_registry()
    reset_calendar_config()
    yield
    reset_registry()
    reset_calendar_config()