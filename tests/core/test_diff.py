# topmark:header:start
#
#   project      : Chronos
#   file         : test_diff.py
#   file_relpath : tests/core/test_diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Signed differences with `Chronos.diff`."""

from __future__ import annotations

import math

import pytest

from chronos import create


def test_month_diff_is_calendar_accurate() -> None:
    """Whole months are counted first, then the fraction between month anchors."""
    june_15 = create("2024-06-15")
    jan_1 = create("2024-01-01")
    assert june_15.diff(jan_1, "month") == 5
    assert june_15.diff(jan_1, "month", precise=True) == pytest.approx(5 + 14 / 30)
    assert jan_1.diff(june_15, "month") == -5
    assert jan_1.diff(june_15, "month", precise=True) == pytest.approx(-(5 + 14 / 31))


def test_year_diff_is_month_diff_over_twelve() -> None:
    """Year differences derive from month differences."""
    assert create("2026-01-01").diff("2024-01-01", "year") == 2
    assert create("2024-07-01").diff("2024-01-01", "year", precise=True) == pytest.approx(0.5)
    assert create("2024-07-01").diff("2024-01-01", "year") == 0


@pytest.mark.parametrize(
    ("unit", "truncated", "precise"),
    [
        ("week", 0, 1.5 / 7),
        ("day", 1, 1.5),
        ("hour", 36, 36.0),
        ("minute", 2_160, 2_160.0),
        ("second", 129_600, 129_600.0),
    ],
)
def test_fixed_unit_diff(unit: str, truncated: int, precise: float) -> None:
    """Fixed units divide the millisecond delta and truncate toward zero."""
    later = create("2024-06-15T12:00:00Z")
    earlier = create("2024-06-14T00:00:00Z")
    assert later.diff(earlier, unit) == truncated
    assert earlier.diff(later, unit) == -truncated
    assert later.diff(earlier, unit, precise=True) == pytest.approx(precise)


def test_default_unit_is_milliseconds() -> None:
    """Without a unit the raw millisecond delta is returned."""
    assert create(1_500).diff(create(250)) == 1_250
    assert create(250).diff(1_500) == -1_250


def test_negative_diff_truncates_toward_zero() -> None:
    """-1.5 days truncates to -1, not -2."""
    assert create("2024-06-14T00:00:00Z").diff("2024-06-15T12:00:00Z", "day") == -1


def test_invalid_diff_is_nan() -> None:
    """Invalid operands yield NaN."""
    assert math.isnan(create("nope").diff(create(0)))
    assert math.isnan(create(0).diff("nope", "month"))
