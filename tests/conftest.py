"""Test configuration and fixtures."""

from datetime import datetime, timezone

import logfire
import pytest

from tests.clock import FrozenClock

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def clock() -> FrozenClock:
    """Clock frozen at Monday, October 19, 2026 15:04 UTC."""
    return FrozenClock(datetime(2026, 10, 19, 15, 4, tzinfo=timezone.utc))
