# topmark:header:start
#
#   project      : Chronos
#   file         : test_parsing.py
#   file_relpath : tests/core/test_parsing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for date-like input coercion (`chronos.core.parsing`)."""

from __future__ import annotations

import math
import time
from datetime import date, datetime, timedelta, timezone
from typing import TYPE_CHECKING

import pytest

from chronos import Chronos, create
from chronos.constants import MAX_INSTANT_MS, MS_PER_HOUR
from chronos.core.parsing import parse_iso, to_instant
from tests.conftest import KOREA, US_EASTERN

if TYPE_CHECKING:
    from collections.abc import Callable

JUNE_15_2024_MS = 1_718_409_600_000
SAMPLE_MS = 1_718_461_805_007  # 2024-06-15T14:30:05.007Z


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("2024-06-15", JUNE_15_2024_MS),
        ("2024-06", 1_717_200_000_000),
        ("2024", 1_704_067_200_000),
        ("2024-06-15T14:30:05.007Z", SAMPLE_MS),
        ("2024-06-15t14:30:05.007z", SAMPLE_MS),
        ("2024-06-15T14:30:05.0071234Z", SAMPLE_MS),
        ("2024-06-15T16:30:05.007+02:00", SAMPLE_MS),
        ("2024-06-15T16:30:05.007+0200", SAMPLE_MS),
        ("2024-06-15T12:30:05.007-02", SAMPLE_MS),
        ("2024-06-15T14:30Z", SAMPLE_MS - 5_007),
        ("2024-06-15 14:30:05.007Z", SAMPLE_MS),
        ("  2024-06-15  ", JUNE_15_2024_MS),
        ("+275760-09-13T00:00:00.000Z", MAX_INSTANT_MS),
        ("-271821-04-20T00:00:00.000Z", -MAX_INSTANT_MS),
        ("1969-12-31T23:59:59.999Z", -1),
    ],
)
def test_parse_iso_valid(text: str, expected: int) -> None:
    """ISO-8601 subset parses to the expected instant."""
    assert parse_iso(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "garbage",
        "2024-13-01",
        "2024-00-10",
        "2024-02-30",
        "2023-02-29",
        "2024-06-15T25:00",
        "2024-06-15T24:01",
        "2024-06-15T12:60",
        "2024-06-15T12:30:60",
        "2024-06-15T12:30+24:00",
        "24-06-15",
        "2024/06/15",
        "-000000-01-01",
        "+275760-09-13T00:00:00.001Z",
        "2024-06-15T12",
    ],
)
def test_parse_iso_invalid(text: str) -> None:
    """Malformed or out-of-range strings yield the invalid instant."""
    assert parse_iso(text) is None


def test_date_only_is_utc_and_date_time_is_local(local_tz: Callable[[str], None]) -> None:
    """Date-only strings are UTC midnight; date-times without offset use the host zone."""
    local_tz(KOREA)
    assert parse_iso("2024-06-15") == JUNE_15_2024_MS
    assert parse_iso("2024-06-15T09:00:00") == JUNE_15_2024_MS


def test_end_of_day_24_00() -> None:
    """``24:00`` denotes the start of the next day."""
    assert parse_iso("2024-06-15T24:00") == JUNE_15_2024_MS + 24 * MS_PER_HOUR


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, 0),
        (SAMPLE_MS, SAMPLE_MS),
        (1.9, 1),
        (-1.9, -1),
        (float(MAX_INSTANT_MS), MAX_INSTANT_MS),
        (MAX_INSTANT_MS + 1, None),
        (math.nan, None),
        (math.inf, None),
        (-math.inf, None),
    ],
)
def test_numbers_are_epoch_milliseconds(value: float, expected: int | None) -> None:
    """Numbers are truncated toward zero; non-finite or clipped values are invalid."""
    assert to_instant(value) == expected


def test_datetime_inputs(local_tz: Callable[[str], None]) -> None:
    """Aware datetimes keep their instant, naive ones are local, dates are UTC midnight."""
    aware = datetime(2024, 6, 15, 14, 30, 5, 7_000, tzinfo=timezone.utc)
    assert to_instant(aware) == SAMPLE_MS
    shifted = aware.astimezone(timezone(timedelta(hours=-7)))
    assert to_instant(shifted) == SAMPLE_MS

    local_tz(US_EASTERN)
    naive = datetime(2024, 6, 15, 10, 30, 5, 7_000)
    assert to_instant(naive) == SAMPLE_MS
    assert to_instant(date(2024, 6, 15)) == JUNE_15_2024_MS


def test_none_means_now() -> None:
    """Only None reads the wall clock."""
    before = time.time_ns() // 1_000_000
    value = to_instant(None)
    after = time.time_ns() // 1_000_000
    assert value is not None
    assert before <= value <= after


def test_chronos_input_keeps_instant() -> None:
    """A Chronos is accepted wherever a date-like value is."""
    source = create(SAMPLE_MS, utc=True)
    assert to_instant(source) == SAMPLE_MS
    assert Chronos(source).value_of() == SAMPLE_MS
    assert to_instant(create("nope")) is None


@pytest.mark.parametrize("value", [True, False, object(), [2024, 6, 15], b"2024-06-15"])
def test_unsupported_types_raise(value: object) -> None:
    """Passing a non date-like type is a programmer error."""
    with pytest.raises(TypeError):
        to_instant(value)  # type: ignore[arg-type]
