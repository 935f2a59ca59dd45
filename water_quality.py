# water_quality.py
"""
Classifies single sensor values against the WHO drinking-water thresholds.
"""
import math

from threshold_config import WHO_THRESHOLDS

SAFE = "Safe"
UNSAFE = "Unsafe"
UNKNOWN = "Unknown"


def _is_missing(value):
    if value is None:
        return True
    try:
        return math.isnan(value)
    except TypeError:
        return True


def evaluate(metric, value):
    """
    Returns 'Safe', 'Unsafe' or 'Unknown' for a value of the given metric.

    A missing or NaN value is 'Unknown'. pH must lie within its WHO range
    (inclusive); every other metric only has an upper limit, no lower bound
    is enforced.
    """
    limits = WHO_THRESHOLDS[metric]
    if _is_missing(value):
        return UNKNOWN
    if metric == "ph":
        return SAFE if limits["min"] <= value <= limits["max"] else UNSAFE
    return SAFE if value <= limits["max"] else UNSAFE


def who_discussion(metric, value):
    """Explanatory text describing whether a value complies with the WHO limit."""
    status = evaluate(metric, value)
    limits = WHO_THRESHOLDS[metric]
    if metric == "ph":
        range_text = f"pH ({limits['min']}–{limits['max']})"
        if status == SAFE:
            return f"Within WHO recommended {range_text}"
        if status == UNSAFE:
            return f"⚠️ Out of WHO recommended {range_text}"
        return f"No valid reading to compare against WHO recommended {range_text}"

    if status == SAFE:
        return f"Within WHO recommended limit ({limits['max']})"
    if status == UNSAFE:
        return f"⚠️ Exceeds WHO recommended limit ({limits['max']})"
    return f"No valid reading to compare against WHO recommended limit ({limits['max']})"


def status_class(status):
    """CSS class used by the page for a status label."""
    return status.lower()
