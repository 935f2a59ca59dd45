# background_tasks.py
"""
The poll loop: fetch the sheet, then redraw the dashboard and the charts,
once immediately and then on a fixed interval.
"""
import logging
import math
import threading
import time

from config import POLL_INTERVAL_SECONDS
from sheet_api import SheetFetchError, fetch_readings

logger = logging.getLogger(__name__)


def next_deadline(previous, interval, now):
    """
    The next tick after `previous` on a fixed grid of `interval` seconds.
    Ticks that have already passed are skipped, so the result is never before `now`.
    """
    if interval <= 0:
        return now
    deadline = previous + interval
    if deadline < now:
        deadline += math.ceil((now - deadline) / interval) * interval
    return deadline


class Poller:
    """
    Runs poll cycles on a background thread. Cycles never overlap: a tick
    that fires while a cycle is still in progress is skipped.
    """

    def __init__(self, dashboard, charts, fetch=fetch_readings, interval=POLL_INTERVAL_SECONDS):
        self.dashboard = dashboard
        self.charts = charts
        self.fetch = fetch
        self.interval = interval
        self.latest_readings = None
        self.last_error = None
        self._cycle_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread = None

    def run_cycle(self):
        """
        Performs one fetch-evaluate-render pass.
        Returns True if the cycle ran, False if it was skipped because another
        cycle was still in progress or abandoned because the fetch failed.
        """
        if not self._cycle_lock.acquire(blocking=False):
            logger.debug("Previous poll cycle still running; skipping this tick.")
            return False
        try:
            try:
                readings = self.fetch()
            except SheetFetchError as e:
                self.last_error = str(e)
                logger.warning("Poll cycle abandoned: %s", e)
                return False

            self.latest_readings = readings
            self.last_error = None

            if not readings:
                logger.info("Sheet has no data rows yet.")
                self._safely("dashboard", self.dashboard.render_empty)
                self._safely("charts", self.charts.clear)
                return True

            self._safely("dashboard", self.dashboard.render, readings)
            self._safely("charts", self.charts.render, readings)
            return True
        finally:
            self._cycle_lock.release()

    def _safely(self, name, func, *args):
        try:
            func(*args)
        except Exception as e:
            logger.error("Error while rendering %s: %s", name, e)

    def _loop(self):
        deadline = time.monotonic()
        while not self._stop_event.is_set():
            try:
                self.run_cycle()
            except Exception as e:
                logger.exception("Unexpected error in poll cycle: %s", e)
            deadline = next_deadline(deadline, self.interval, time.monotonic())
            self._stop_event.wait(max(0.0, deadline - time.monotonic()))

    def start(self):
        """Starts polling on a daemon thread. Calling it again while running does nothing."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._loop, name="sheet-poller", daemon=True)
        self._thread.start()
        logger.info("Sheet poller started (every %s s).", self.interval)

    def stop(self, timeout=None):
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
        self._thread = None

    @property
    def running(self):
        return self._thread is not None and self._thread.is_alive()
