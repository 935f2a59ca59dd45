# sheet_api.py
"""
Fetches the published sensor spreadsheet (CSV export) and parses it into
an ordered snapshot of readings.
"""
import logging
from typing import NamedTuple

import pandas as pd
import requests

from config import FETCH_TIMEOUT_SECONDS, SHEET_URL
from threshold_config import METRIC_KEYS

logger = logging.getLogger(__name__)

COLUMNS = ("time",) + METRIC_KEYS


class Reading(NamedTuple):
    """One row of the sheet. Numeric fields that failed to parse are NaN."""
    time: str
    ph: float
    tds: float
    turbidity: float
    temp: float


class SheetFetchError(Exception):
    """The sheet could not be downloaded (network error or bad status)."""


def parse_csv(text):
    """
    Parses the CSV body into a tuple of Readings, in source order.

    The first line is a header and is discarded, as are blank lines. Only the
    first five comma-separated fields of a row are used; missing or
    non-numeric measurements become NaN instead of failing the row.
    """
    rows = []
    for line in text.strip().split("\n")[1:]:
        line = line.strip()
        if not line:
            continue
        fields = [field.strip() for field in line.split(",")[:len(COLUMNS)]]
        fields += [None] * (len(COLUMNS) - len(fields))
        rows.append(fields)

    if not rows:
        return ()

    frame = pd.DataFrame(rows, columns=list(COLUMNS), dtype=object)
    for key in METRIC_KEYS:
        frame[key] = pd.to_numeric(frame[key], errors="coerce").astype(float)
    frame["time"] = frame["time"].fillna("")

    return tuple(
        Reading(row[0], *(float(value) for value in row[1:]))
        for row in frame.itertuples(index=False, name=None)
    )


def fetch_readings(url=SHEET_URL, timeout=FETCH_TIMEOUT_SECONDS, session=None):
    """
    Downloads the sheet and returns its parsed readings.
    Raises SheetFetchError if the request fails or the server returns an error status.
    """
    http = session or requests
    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise SheetFetchError(f"Could not fetch sheet data: {e}") from e

    readings = parse_csv(response.text)
    logger.debug("Fetched %d readings from sheet.", len(readings))
    return readings
