# topmark:header:start
#
#   project      : Chronos
#   file         : calendar.py
#   file_relpath : src/chronos/core/calendar.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Proleptic Gregorian calendar arithmetic over millisecond instants.

Instants are integer milliseconds since 1970-01-01T00:00:00.000Z. ``None``
stands for the invalid instant and is never passed to the helpers in this
module, which assume a valid, time-clipped value.

Field composition follows the rollover rules of a standard date object:
out-of-range months, days, hours, etc. carry into the next coarser field
(month 12 is January of the following year, day 0 is the last day of the
previous month). Local-time fields are resolved through the host time zone;
when a local wall time is ambiguous (DST fall back) the earlier instant wins,
and a wall time inside a DST gap is moved forward by the gap length.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Final

from chronos.config.logging import get_logger
from chronos.constants import (
    MAX_INSTANT_MS,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)

logger = get_logger(__name__)

# 1970-01-01 was a Thursday
_EPOCH_WEEKDAY: Final[int] = 4


@dataclass(frozen=True, slots=True)
class CalendarFields:
    """Human-facing decomposition of an instant.

    Attributes:
        year (int): Full year (may be negative or above 9999).
        month (int): 0-based month (0 = January).
        date (int): Day of month, 1-based.
        hour (int): Hour of day (0-23).
        minute (int): Minute (0-59).
        second (int): Second (0-59).
        millisecond (int): Millisecond (0-999).
        weekday (int): Day of week, 0 = Sunday. Ignored by `compose`.
    """

    year: int
    month: int
    date: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    weekday: int = 0


# --- Civil day arithmetic ---


def days_from_civil(year: int, month: int, day: int) -> int:
    """Return days since the epoch for a proleptic Gregorian date (``month`` is 1-based)."""
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = month - 3 if month > 2 else month + 9
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of `days_from_civil`: return ``(year, month, day)`` with a 1-based month."""
    z = days + 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400
    return (year + 1 if month <= 2 else year), month, day


def make_day(year: int, month: int, date: int) -> int:
    """Return the day number for ``year``/``month`` (0-based, may overflow)/``date``."""
    year += month // 12
    month %= 12
    return days_from_civil(year, month + 1, 1) + date - 1


def make_time(hour: int, minute: int, second: int, millisecond: int) -> int:
    """Return milliseconds for a time of day; components may overflow."""
    return hour * MS_PER_HOUR + minute * MS_PER_MINUTE + second * MS_PER_SECOND + millisecond


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` (0-based) of ``year``."""
    return make_day(year, month + 1, 1) - make_day(year, month, 1)


def time_clip(ms: int) -> int | None:
    """Return ``ms`` if it lies within the representable range, else None (invalid)."""
    if abs(ms) > MAX_INSTANT_MS:
        return None
    return ms


# --- Host time zone ---


def utc_offset_ms(instant: int) -> int:
    """Return the host time zone's UTC offset in effect at ``instant``, in milliseconds."""
    try:
        return time.localtime(instant // MS_PER_SECOND).tm_gmtoff * MS_PER_SECOND
    except (OverflowError, OSError, ValueError) as exc:
        # Outside the platform's range: fall back to the standard offset
        logger.trace("localtime() failed for %d (%s); using standard offset", instant, exc)
        return -time.timezone * MS_PER_SECOND


def local_to_utc(local_ms: int) -> int:
    """Return the instant whose local wall time is ``local_ms`` (wall clock milliseconds)."""
    days, ms_of_day = divmod(local_ms, MS_PER_DAY)
    seconds, millis = divmod(ms_of_day, MS_PER_SECOND)
    try:
        year, month, day = civil_from_days(days)
        naive = datetime(year, month, day) + timedelta(seconds=seconds)
        # Naive datetimes are local time; fold=0 selects the earlier of two
        # ambiguous instants and the pre-transition offset inside a gap.
        return round(naive.timestamp()) * MS_PER_SECOND + millis
    except (OverflowError, OSError, ValueError) as exc:
        logger.trace("datetime lookup failed for local %d (%s); using offset guess", local_ms, exc)
        guess = local_ms - utc_offset_ms(local_ms)
        return local_ms - utc_offset_ms(guess)


# --- Decomposition / composition ---


def decompose(instant: int, *, utc: bool) -> CalendarFields:
    """Split a valid instant into UTC or local calendar fields."""
    t = instant if utc else instant + utc_offset_ms(instant)
    days, ms_of_day = divmod(t, MS_PER_DAY)
    year, month, date = civil_from_days(days)
    hour, rest = divmod(ms_of_day, MS_PER_HOUR)
    minute, rest = divmod(rest, MS_PER_MINUTE)
    second, millisecond = divmod(rest, MS_PER_SECOND)
    return CalendarFields(
        year=year,
        month=month - 1,
        date=date,
        hour=hour,
        minute=minute,
        second=second,
        millisecond=millisecond,
        weekday=(days + _EPOCH_WEEKDAY) % 7,
    )


def compose(fields: CalendarFields, *, utc: bool) -> int | None:
    """Build an instant from (possibly out-of-range) fields; None if it cannot be represented.

    ``fields.weekday`` is ignored.
    """
    day = make_day(fields.year, fields.month, fields.date)
    wall = day * MS_PER_DAY + make_time(
        fields.hour, fields.minute, fields.second, fields.millisecond
    )
    # Reject far out-of-range values before asking the host time zone about them
    if abs(wall) > MAX_INSTANT_MS + MS_PER_DAY:
        return None
    return time_clip(wall if utc else local_to_utc(wall))


def local_zone_name(instant: int) -> str:
    """Return the host time zone's abbreviation in effect at ``instant`` (e.g. "CEST")."""
    try:
        return time.localtime(instant // MS_PER_SECOND).tm_zone
    except (OverflowError, OSError, ValueError):
        return time.tzname[0]
