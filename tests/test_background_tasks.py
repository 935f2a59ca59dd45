import threading

import pytest

from background_tasks import Poller, next_deadline
from chart_renderer import TrendChartRenderer
from dashboard_renderer import DashboardRenderer
from helpers import make_reading
from sheet_api import SheetFetchError


class ScriptedFetch:
    """Returns (or raises) the queued results one call at a time."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def make_poller(slots, chart_backend):
    def _make(fetch, mode="average"):
        dashboard = DashboardRenderer(slots, mode=mode)
        charts = TrendChartRenderer(chart_backend)
        return Poller(dashboard, charts, fetch=fetch, interval=0.01)
    return _make


def test_cycle_renders_dashboard_and_charts(make_poller, slots, chart_backend, safe_readings):
    poller = make_poller(ScriptedFetch(safe_readings))

    assert poller.run_cycle() is True

    assert poller.latest_readings == safe_readings
    assert slots.get("last-updated")["text"] == "Last Updated: 2024-01-01 00:01"
    assert len(chart_backend.created()) == 4


def test_fetch_failure_abandons_cycle_and_next_tick_recovers(make_poller, slots, chart_backend, safe_readings):
    fetch = ScriptedFetch(SheetFetchError("timeout"), safe_readings)
    poller = make_poller(fetch)

    assert poller.run_cycle() is False
    assert poller.last_error == "timeout"
    assert poller.latest_readings is None
    assert chart_backend.calls == []
    assert slots.get("ph-card")["html"] == ""

    assert poller.run_cycle() is True
    assert poller.last_error is None
    assert "Latest" in slots.get("ph-card")["html"]


def test_empty_snapshot_shows_waiting_state(make_poller, slots, chart_backend, safe_readings):
    poller = make_poller(ScriptedFetch(safe_readings, ()))
    poller.run_cycle()

    assert poller.run_cycle() is True

    assert poller.latest_readings == ()
    assert slots.get("last-updated")["text"] == "Last Updated: waiting for data"
    assert len(poller.charts.registry) == 0


def test_renderer_error_does_not_escape(chart_backend, safe_readings):
    class BrokenDashboard:
        def render(self, readings):
            raise RuntimeError("boom")

    poller = Poller(BrokenDashboard(), TrendChartRenderer(chart_backend), fetch=ScriptedFetch(safe_readings))

    assert poller.run_cycle() is True
    assert len(chart_backend.created()) == 4


def test_overlapping_cycle_is_skipped(make_poller, safe_readings):
    nested = []

    def fetch():
        nested.append(poller.run_cycle())
        return safe_readings

    poller = make_poller(fetch)

    assert poller.run_cycle() is True
    assert nested == [False]


def test_alert_follows_each_cycle(make_poller, slots):
    fetch = ScriptedFetch((make_reading(ph=5.0),), (make_reading(),))
    poller = make_poller(fetch, mode="alert")

    poller.run_cycle()
    assert slots.get("alertBtn")["visible"] is True

    poller.run_cycle()
    assert slots.get("alertBtn")["visible"] is False


def test_start_runs_immediately_and_stop_ends_loop(make_poller, safe_readings):
    called = threading.Event()

    def fetch():
        called.set()
        return safe_readings

    poller = make_poller(fetch)
    poller.start()
    poller.start()
    try:
        assert called.wait(5)
        assert poller.running
    finally:
        poller.stop(timeout=5)

    assert not poller.running


def test_next_deadline_keeps_a_fixed_grid():
    # A cycle that took 0.25 s does not push the next tick back.
    assert next_deadline(10.0, 1.0, now=10.25) == 11.0


def test_next_deadline_skips_missed_ticks():
    # A 3.5 s fetch misses the ticks at 11, 12 and 13; the next one is 14.
    assert next_deadline(10.0, 1.0, now=13.5) == 14.0
    assert next_deadline(10.0, 1.0, now=12.0) == 12.0


def test_next_deadline_without_interval():
    assert next_deadline(10.0, 0, now=10.5) == 10.5
