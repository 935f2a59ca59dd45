# chart_renderer.py
"""
Redraws one trend chart per metric on every poll cycle.
Charts are never updated in place: the previous chart is destroyed and a
new one is created from the full snapshot.
"""
import logging

from config import CHART_FILL
from threshold_config import METRIC_KEYS, METRICS
from water_quality import who_discussion

logger = logging.getLogger(__name__)


class ChartRegistry:
    """The chart currently displayed for each metric."""

    def __init__(self):
        self._handles = {}

    def __contains__(self, metric):
        return metric in self._handles

    def __len__(self):
        return len(self._handles)

    def get(self, metric):
        return self._handles.get(metric)

    def replace(self, metric, handle):
        """Stores `handle` for the metric and returns the previous one, if any."""
        previous = self._handles.get(metric)
        self._handles[metric] = handle
        return previous

    def pop(self, metric):
        return self._handles.pop(metric, None)

    def clear(self):
        """Empties the table and returns the (metric, handle) pairs it held."""
        removed = list(self._handles.items())
        self._handles.clear()
        return removed


def time_label(timestamp, time_only=True):
    """'2024-01-01 08:30' -> '08:30'. Timestamps without a date part are kept whole."""
    if not time_only:
        return timestamp
    parts = timestamp.split(" ", 1)
    return parts[1] if len(parts) == 2 else timestamp


def build_chart_config(readings, metric, fill=CHART_FILL, time_only=True):
    """Chart.js line-chart configuration for one metric over the whole snapshot."""
    meta = METRICS[metric]
    label = meta["label"]
    color = meta["color"]
    labels = [time_label(r.time, time_only) for r in readings]
    values = [getattr(r, metric) for r in readings]
    latest = values[-1] if values else None

    return {
        "type": "line",
        "data": {
            "labels": labels,
            "datasets": [{
                "label": label,
                "data": values,
                "borderColor": color,
                "backgroundColor": color + "33",
                "fill": fill,
                "tension": 0.3,
                "pointRadius": 2,
            }],
        },
        "options": {
            "responsive": True,
            "plugins": {
                "title": {"display": True, "text": f"{label} vs Time"},
                "subtitle": {"display": True, "text": who_discussion(metric, latest)},
                "tooltip": {"mode": "index", "intersect": False},
            },
            "scales": {
                "x": {"title": {"display": True, "text": "Time"}, "ticks": {"maxRotation": 0}},
                "y": {"title": {"display": True, "text": label}},
            },
        },
    }


class TrendChartRenderer:
    def __init__(self, backend, registry=None, fill=CHART_FILL, time_only=True):
        self.backend = backend
        self.registry = registry if registry is not None else ChartRegistry()
        self.fill = fill
        self.time_only = time_only

    def render_metric(self, readings, metric):
        """Destroys the metric's current chart, then creates its replacement."""
        previous = self.registry.pop(metric)
        if previous is not None:
            self.backend.destroy(previous)

        config = build_chart_config(readings, metric, self.fill, self.time_only)
        handle = self.backend.create(METRICS[metric]["canvas"], config)
        self.registry.replace(metric, handle)
        return handle

    def render(self, readings):
        """
        Redraws all four charts. A failure on one metric is logged and does
        not stop the others. Returns the metrics that failed.
        """
        failed = []
        for metric in METRIC_KEYS:
            try:
                self.render_metric(readings, metric)
            except Exception as e:
                logger.error("Could not render %s chart: %s", metric, e)
                failed.append(metric)
        return failed

    def clear(self):
        """Destroys every chart currently displayed."""
        for metric, handle in self.registry.clear():
            try:
                self.backend.destroy(handle)
            except Exception as e:
                logger.error("Could not destroy %s chart: %s", metric, e)
