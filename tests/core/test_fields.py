# topmark:header:start
#
#   project      : Chronos
#   file         : test_fields.py
#   file_relpath : tests/core/test_fields.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Field accessors, setters, immutability and factories of `Chronos`."""

from __future__ import annotations

import copy
import math
import pickle
from datetime import datetime, timezone
from typing import TYPE_CHECKING

import pytest

from chronos import create, from_unix_seconds, now, utc_of
from tests.conftest import KOREA, US_EASTERN

if TYPE_CHECKING:
    from collections.abc import Callable

SAMPLE = "2024-06-15T14:30:05.007Z"


def test_utc_accessors() -> None:
    """UTC mode reads UTC calendar fields."""
    c = create(SAMPLE, utc=True)
    assert c.year() == 2024
    assert c.month() == 5
    assert c.date() == 15
    assert c.day() == 6
    assert c.hour() == 14
    assert c.minute() == 30
    assert c.second() == 5
    assert c.millisecond() == 7


def test_local_accessors_follow_host_zone(local_tz: Callable[[str], None]) -> None:
    """Local mode reads fields in the host zone; the instant is unchanged."""
    local_tz(KOREA)
    c = create(SAMPLE)
    assert (c.date(), c.hour(), c.minute()) == (15, 23, 30)
    assert c.to_utc_mode().hour() == 14
    assert c.to_utc_mode().value_of() == c.value_of()


def test_setters_replace_one_field() -> None:
    """Each setter returns a copy with exactly one field changed."""
    c = create(SAMPLE, utc=True)
    assert c.set_year(2020).to_iso_string() == "2020-06-15T14:30:05.007Z"
    assert c.set_month(0).to_iso_string() == "2024-01-15T14:30:05.007Z"
    assert c.set_date(1).to_iso_string() == "2024-06-01T14:30:05.007Z"
    assert c.set_hour(0).to_iso_string() == "2024-06-15T00:30:05.007Z"
    assert c.set_minute(59).to_iso_string() == "2024-06-15T14:59:05.007Z"
    assert c.set_second(0).to_iso_string() == "2024-06-15T14:30:00.007Z"
    assert c.set_millisecond(999).to_iso_string() == "2024-06-15T14:30:05.999Z"


def test_setters_roll_over() -> None:
    """Out-of-range values carry into coarser fields."""
    c = create(SAMPLE, utc=True)
    assert c.set_month(12).to_iso_string() == "2025-01-15T14:30:05.007Z"
    assert c.set_month(-1).to_iso_string() == "2023-12-15T14:30:05.007Z"
    assert c.set_date(0).to_iso_string() == "2024-05-31T14:30:05.007Z"
    assert c.set_date(31).to_iso_string() == "2024-07-01T14:30:05.007Z"
    assert c.set_hour(25).to_iso_string() == "2024-06-16T01:30:05.007Z"
    assert c.set_millisecond(1000).to_iso_string() == "2024-06-15T14:30:06.000Z"
    assert create("2024-02-29", utc=True).set_year(2023).format() == "2023-03-01"


def test_setters_truncate_and_invalidate() -> None:
    """Fractional values truncate; non-finite values give an invalid date."""
    c = create(SAMPLE, utc=True)
    assert c.set_hour(3.9).hour() == 3
    assert not c.set_hour(math.nan).is_valid()
    assert not c.set_year(math.inf).is_valid()
    with pytest.raises(TypeError):
        c.set_hour("3")  # type: ignore[arg-type]


def test_local_setter_keeps_wall_clock(local_tz: Callable[[str], None]) -> None:
    """Setting a local field across a DST change keeps the other wall-clock fields."""
    local_tz(US_EASTERN)
    winter = create("2024-01-15T12:00:00")
    summer = winter.set_month(6)
    assert summer.hour() == 12
    assert summer.to_iso_string() == "2024-07-15T16:00:00.000Z"


def test_immutability() -> None:
    """Transformations never change the receiver and attributes cannot be assigned."""
    c = create(SAMPLE, utc=True)
    before = c.value_of()
    c.add(1, "day")
    c.set_year(1999)
    c.start_of("month")
    c.to_local_mode()
    assert c.value_of() == before
    assert c.is_utc_mode()
    with pytest.raises(AttributeError):
        c._instant = 0  # type: ignore[misc]
    with pytest.raises(AttributeError):
        c.anything = 1  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        del c._utc


def test_copy_and_pickle_preserve_value_and_mode() -> None:
    """Copies and pickles keep the instant and the mode flag."""
    c = create(SAMPLE, utc=True)
    for clone in (copy.copy(c), copy.deepcopy(c), pickle.loads(pickle.dumps(c))):
        assert clone == c
        assert clone.is_utc_mode()
    invalid = pickle.loads(pickle.dumps(create("nope")))
    assert not invalid.is_valid()


def test_factories() -> None:
    """create / utc_of / from_unix_seconds / now."""
    assert not create(0).is_utc_mode()
    assert utc_of(0).is_utc_mode()
    assert create(0, utc=True) == utc_of(0)
    assert from_unix_seconds(1_718_409_600).value_of() == 1_718_409_600_000
    assert from_unix_seconds(1.5, utc=True).value_of() == 1_500
    assert from_unix_seconds(1, utc=True).is_utc_mode()
    assert now().is_valid()
    assert now(utc=True).is_utc_mode()
    with pytest.raises(TypeError):
        from_unix_seconds("1")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        create(True)


def test_native_date_conversion() -> None:
    """to_native_date returns an aware datetime in the value's mode."""
    c = create(SAMPLE, utc=True)
    native = c.to_native_date()
    assert native == datetime(2024, 6, 15, 14, 30, 5, 7_000, tzinfo=timezone.utc)
    assert native is not None and native.tzinfo is timezone.utc

    local = c.to_local_mode().to_native_date()
    assert local is not None and local.utcoffset() is not None
    assert local == native
    assert create("+200000-01-01").to_native_date() is None


def test_unix_seconds_floors() -> None:
    """unix_seconds floors toward negative infinity."""
    assert create(1_999).unix_seconds() == 1
    assert create(-1).unix_seconds() == -1
    assert create(0).unix_seconds() == 0
