"""Test configuration and shared fixtures."""

import pytest

from helpers import RecordingChartBackend, make_reading
from presentation import PageSlots


@pytest.fixture
def events():
    return []


@pytest.fixture
def slots(events):
    return PageSlots(emit=lambda event, data: events.append((event, data)))


@pytest.fixture
def chart_backend():
    return RecordingChartBackend()


@pytest.fixture
def safe_readings():
    return (
        make_reading("2024-01-01 00:00"),
        make_reading("2024-01-01 00:01"),
    )
