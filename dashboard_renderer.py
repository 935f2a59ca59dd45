# dashboard_renderer.py
"""
Writes the summary cards, the "last updated" line and the alert button of
the dashboard from a snapshot of readings.
"""
import logging
import math
from typing import NamedTuple

import pandas as pd

from alerter import build_alert_button_html
from config import AVERAGE_WINDOW
from presentation import SlotMissingError
from sheet_api import Reading
from threshold_config import ALERT_SLOT, LAST_UPDATED_SLOT, METRIC_KEYS, METRICS
from water_quality import UNSAFE, evaluate, status_class

logger = logging.getLogger(__name__)

MODES = ("average", "alert", "both")


class MetricSummary(NamedTuple):
    latest: float
    average: float
    status: str


def format_value(value):
    """Two decimals, or 'NaN' when the reading could not be parsed."""
    if value is None or math.isnan(value):
        return "NaN"
    return f"{value:.2f}"


def summarize(readings, window=AVERAGE_WINDOW):
    """
    Per metric: the latest value, the mean over the trailing `window`
    readings (fewer if the snapshot is shorter) and the status of the latest
    value. A NaN inside the window makes the average NaN.
    """
    if not readings:
        raise ValueError("Cannot summarize an empty set of readings.")

    frame = pd.DataFrame(list(readings), columns=list(Reading._fields))
    recent = frame.tail(window)
    latest = readings[-1]

    summaries = {}
    for key in METRIC_KEYS:
        value = getattr(latest, key)
        summaries[key] = MetricSummary(
            latest=value,
            average=float(recent[key].mean(skipna=False)),
            status=evaluate(key, value),
        )
    return summaries


def build_card_html(metric, summary, show_average=True, window=AVERAGE_WINDOW):
    lines = [
        f"<h3>{metric.upper()}</h3>",
        f"<p>Latest: <strong>{format_value(summary.latest)}</strong></p>",
    ]
    if show_average:
        lines.append(f"<p>Avg (Last {window}): <strong>{format_value(summary.average)}</strong></p>")
    lines.append(f'<p class="{status_class(summary.status)}">{summary.status}</p>')
    return "\n".join(lines)


class DashboardRenderer:
    """
    Renders the dashboard cards into the page slots.

    mode 'average' shows the trailing-window mean on each card, 'alert'
    shows the alert button whenever a latest value is unsafe, 'both'
    combines the two.
    """

    def __init__(self, slots, mode="average", window=AVERAGE_WINDOW):
        if mode not in MODES:
            raise ValueError(f"Unknown dashboard mode '{mode}'. Expected one of {MODES}.")
        self.slots = slots
        self.mode = mode
        self.window = window
        self.show_average = mode in ("average", "both")
        self.alert_enabled = mode in ("alert", "both")

        self._alert_markup_written = False

    def _write(self, write, slot, content):
        try:
            write(slot, content)
            return True
        except SlotMissingError:
            logger.error("Dashboard slot '%s' is missing; skipping it.", slot)
            return False

    def _show_alert(self, visible):
        if not self._alert_markup_written:
            self._alert_markup_written = self._write(self.slots.set_html, ALERT_SLOT, build_alert_button_html())
        self._write(self.slots.set_visible, ALERT_SLOT, visible)

    def render(self, readings):
        """
        Updates every card from the latest reading. `readings` must not be
        empty; use render_empty() while there is no data yet.
        Returns True if any metric is currently unsafe.
        """
        summaries = summarize(readings, self.window)
        latest = readings[-1]

        self._write(self.slots.set_text, LAST_UPDATED_SLOT, f"Last Updated: {latest.time}")
        for key in METRIC_KEYS:
            html = build_card_html(key, summaries[key], self.show_average, self.window)
            self._write(self.slots.set_html, METRICS[key]["card"], html)

        any_unsafe = any(summary.status == UNSAFE for summary in summaries.values())
        if self.alert_enabled:
            self._show_alert(any_unsafe)
        return any_unsafe

    def render_empty(self):
        """Shows the waiting state used before the sheet has any data rows."""
        self._write(self.slots.set_text, LAST_UPDATED_SLOT, "Last Updated: waiting for data")
        for key in METRIC_KEYS:
            self._write(self.slots.set_html, METRICS[key]["card"],
                        f"<h3>{key.upper()}</h3>\n<p>No data yet</p>")
        if self.alert_enabled:
            self._show_alert(False)
