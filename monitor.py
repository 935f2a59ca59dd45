# monitor.py
"""
Wires the presentation slots, renderers and poll loop together.
"""
from background_tasks import Poller
from chart_renderer import ChartRegistry, TrendChartRenderer
from config import AVERAGE_WINDOW, CHART_FILL, DASHBOARD_MODE, POLL_INTERVAL_SECONDS
from dashboard_renderer import DashboardRenderer
from presentation import PageSlots, SocketChartBackend
from sheet_api import fetch_readings


class Monitor:
    """Everything one dashboard page needs, owned in one place."""

    def __init__(self, slots, chart_backend, dashboard, charts, poller):
        self.slots = slots
        self.chart_backend = chart_backend
        self.dashboard = dashboard
        self.charts = charts
        self.poller = poller

    def snapshot(self):
        """Current page state, used by freshly loaded pages before live events arrive."""
        return {"slots": self.slots.snapshot(), "charts": self.chart_backend.snapshot()}


def build_monitor(emit=None, fetch=fetch_readings, mode=DASHBOARD_MODE,
                  window=AVERAGE_WINDOW, fill=CHART_FILL, interval=POLL_INTERVAL_SECONDS):
    slots = PageSlots(emit=emit)
    chart_backend = SocketChartBackend(emit=emit)
    dashboard = DashboardRenderer(slots, mode=mode, window=window)
    charts = TrendChartRenderer(chart_backend, ChartRegistry(), fill=fill)
    poller = Poller(dashboard, charts, fetch=fetch, interval=interval)
    return Monitor(slots, chart_backend, dashboard, charts, poller)
