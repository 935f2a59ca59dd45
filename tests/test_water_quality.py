import math

import pytest

from water_quality import SAFE, UNKNOWN, UNSAFE, evaluate, status_class, who_discussion


@pytest.mark.parametrize("value, expected", [
    (6.5, SAFE),
    (7.0, SAFE),
    (8.5, SAFE),
    (6.49, UNSAFE),
    (8.51, UNSAFE),
    (0.0, UNSAFE),
])
def test_ph_is_two_sided(value, expected):
    assert evaluate("ph", value) == expected


@pytest.mark.parametrize("metric, limit", [
    ("tds", 600),
    ("turbidity", 5),
    ("temp", 30),
])
def test_single_sided_metrics(metric, limit):
    assert evaluate(metric, limit) == SAFE
    assert evaluate(metric, limit - 0.01) == SAFE
    assert evaluate(metric, limit + 0.01) == UNSAFE
    # No lower bound is enforced.
    assert evaluate(metric, -100.0) == SAFE


@pytest.mark.parametrize("metric", ["ph", "tds", "turbidity", "temp"])
def test_missing_values_are_unknown(metric):
    assert evaluate(metric, math.nan) == UNKNOWN
    assert evaluate(metric, float("nan")) == UNKNOWN
    assert evaluate(metric, None) == UNKNOWN


def test_unknown_metric_raises():
    with pytest.raises(KeyError):
        evaluate("chlorine", 1.0)


def test_who_discussion_ph():
    assert who_discussion("ph", 7.2) == "Within WHO recommended pH (6.5–8.5)"
    assert who_discussion("ph", 9.1) == "⚠️ Out of WHO recommended pH (6.5–8.5)"
    assert "No valid reading" in who_discussion("ph", math.nan)


def test_who_discussion_upper_limit():
    assert who_discussion("tds", 100) == "Within WHO recommended limit (600)"
    assert who_discussion("turbidity", 7) == "⚠️ Exceeds WHO recommended limit (5)"
    assert who_discussion("temp", math.nan).startswith("No valid reading")


def test_status_class():
    assert status_class(SAFE) == "safe"
    assert status_class(UNSAFE) == "unsafe"
    assert status_class(UNKNOWN) == "unknown"
