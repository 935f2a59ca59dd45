# presentation.py
"""
Server-side view of the dashboard page.

PageSlots holds the content of every named element the page displays and
broadcasts each change to connected browsers. SocketChartBackend is the
charting capability: it hands Chart.js configurations to the page, which
creates and destroys the actual chart instances.
"""
import itertools
import logging
import math
import threading

from threshold_config import ALERT_SLOT, CARD_SLOTS, CHART_CANVASES, LAST_UPDATED_SLOT

logger = logging.getLogger(__name__)

DASHBOARD_SLOTS = CARD_SLOTS + (LAST_UPDATED_SLOT, ALERT_SLOT)


class SlotMissingError(KeyError):
    """Raised when writing to a slot the page does not have."""


class ChartError(Exception):
    """Raised when a chart cannot be created from the given configuration."""


def json_safe(value):
    """Recursively replaces NaN/inf floats with None so the payload is valid JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(item) for item in value]
    return value


class PageSlots:
    """Named presentation slots. Every write is broadcast through `emit`."""

    def __init__(self, slot_names=DASHBOARD_SLOTS, emit=None, hidden=(ALERT_SLOT,)):
        self._slots = {
            name: {"html": "", "text": "", "visible": name not in hidden} for name in slot_names
        }
        self._emit = emit
        self._lock = threading.Lock()

    def __contains__(self, slot):
        return slot in self._slots

    def _update(self, slot, **changes):
        with self._lock:
            if slot not in self._slots:
                raise SlotMissingError(slot)
            self._slots[slot].update(changes)
        if self._emit is not None:
            self._emit("slot_update", {"slot": slot, **changes})

    def set_html(self, slot, html):
        self._update(slot, html=html)

    def set_text(self, slot, text):
        self._update(slot, text=text)

    def set_visible(self, slot, visible):
        self._update(slot, visible=bool(visible))

    def get(self, slot):
        with self._lock:
            if slot not in self._slots:
                raise SlotMissingError(slot)
            return dict(self._slots[slot])

    def snapshot(self):
        with self._lock:
            return {name: dict(state) for name, state in self._slots.items()}


class ChartHandle:
    """A chart instance living on one canvas of the page."""

    _ids = itertools.count(1)

    def __init__(self, canvas, config):
        self.id = next(self._ids)
        self.canvas = canvas
        self.config = config
        self.destroyed = False

    def __repr__(self):
        return f"<ChartHandle {self.id} on {self.canvas}{' (destroyed)' if self.destroyed else ''}>"


class SocketChartBackend:
    """Creates and destroys Chart.js charts on the page over Socket.IO."""

    def __init__(self, canvases=CHART_CANVASES, emit=None):
        self._canvases = set(canvases)
        self._emit = emit
        self._live = {}
        self._lock = threading.Lock()

    def create(self, canvas, config):
        if canvas not in self._canvases:
            raise ChartError(f"Canvas '{canvas}' does not exist on the page.")
        labels = config.get("data", {}).get("labels", [])
        for dataset in config.get("data", {}).get("datasets", []):
            if len(dataset.get("data", [])) != len(labels):
                raise ChartError(
                    f"Dataset '{dataset.get('label')}' has {len(dataset.get('data', []))} values "
                    f"for {len(labels)} labels."
                )

        handle = ChartHandle(canvas, config)
        with self._lock:
            self._live[canvas] = handle
        if self._emit is not None:
            self._emit("chart_create", {"id": handle.id, "canvas": canvas, "config": json_safe(config)})
        return handle

    def destroy(self, handle):
        if handle.destroyed:
            return
        handle.destroyed = True
        with self._lock:
            if self._live.get(handle.canvas) is handle:
                del self._live[handle.canvas]
        if self._emit is not None:
            self._emit("chart_destroy", {"id": handle.id, "canvas": handle.canvas})

    def snapshot(self):
        """Live charts by canvas, in the same shape as the chart_create event."""
        with self._lock:
            live = list(self._live.values())
        return {h.canvas: {"id": h.id, "config": json_safe(h.config)} for h in live}
