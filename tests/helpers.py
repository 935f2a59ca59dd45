"""Test doubles shared by the test modules."""

import requests

from sheet_api import Reading

SAFE_VALUES = {"ph": 7.0, "tds": 300.0, "turbidity": 2.0, "temp": 25.0}


def make_reading(time="2024-01-01 00:00", **values):
    fields = dict(SAFE_VALUES, **values)
    return Reading(time, fields["ph"], fields["tds"], fields["turbidity"], fields["temp"])


class RecordingChartBackend:
    """Charting capability double that records every create/destroy call."""

    def __init__(self, fail_on=()):
        self.calls = []
        self.fail_on = set(fail_on)

    def create(self, canvas, config):
        if canvas in self.fail_on:
            raise RuntimeError(f"cannot draw on {canvas}")
        handle = object()
        self.calls.append(("create", canvas, handle))
        return handle

    def destroy(self, handle):
        self.calls.append(("destroy", handle))

    def created(self):
        return [call for call in self.calls if call[0] == "create"]


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def get(self, url, timeout=None):
        self.requests.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response
