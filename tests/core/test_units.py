# topmark:header:start
#
#   project      : Chronos
#   file         : test_units.py
#   file_relpath : tests/core/test_units.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parsing of time units."""

from __future__ import annotations

import pytest

from chronos import Unit


@pytest.mark.parametrize(
    ("value", "unit"),
    [
        ("year", Unit.YEAR),
        ("Years", Unit.YEAR),
        ("  month ", Unit.MONTH),
        ("weeks", Unit.WEEK),
        ("DAY", Unit.DAY),
        ("milliseconds", Unit.MILLISECOND),
        (Unit.SECOND, Unit.SECOND),
    ],
)
def test_parse(value: str | Unit, unit: Unit) -> None:
    """Case-insensitive, plural-tolerant parsing."""
    assert Unit.parse(value) is unit


@pytest.mark.parametrize("value", ["", "s", "fortnight", "dayss", 3])
def test_parse_rejects_unknown(value: object) -> None:
    """Unknown units raise ValueError."""
    with pytest.raises(ValueError, match="Unknown unit"):
        Unit.parse(value)  # type: ignore[arg-type]


def test_fixed_lengths() -> None:
    """Only calendar units lack a fixed length."""
    assert Unit.YEAR.fixed_ms is None
    assert Unit.MONTH.fixed_ms is None
    assert Unit.WEEK.fixed_ms == 604_800_000
    assert Unit.DAY.fixed_ms == 86_400_000
    assert Unit.MILLISECOND.fixed_ms == 1


def test_str_enum_interchangeable() -> None:
    """Members compare equal to their string values."""
    assert Unit.DAY == "day"
    assert [u.value for u in Unit] == [
        "year",
        "month",
        "week",
        "day",
        "hour",
        "minute",
        "second",
        "millisecond",
    ]
