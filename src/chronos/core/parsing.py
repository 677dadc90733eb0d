# topmark:header:start
#
#   project      : Chronos
#   file         : parsing.py
#   file_relpath : src/chronos/core/parsing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Coerce date-like inputs into millisecond instants.

Accepted inputs:
    - ``None``: the current wall clock.
    - ``str``: an ISO-8601 date or date-time (see `parse_iso`).
    - ``int`` / ``float``: epoch milliseconds (truncated toward zero).
    - ``datetime.datetime``: aware values map to their instant, naive values are
      read as local wall time.
    - ``datetime.date``: midnight UTC, like the equivalent date-only string.
    - anything exposing ``value_of()`` (a `Chronos`): its instant.

Malformed data never raises; it yields ``None`` (the invalid instant). Passing
an unsupported *type* is a programmer error and raises `TypeError`.
"""

from __future__ import annotations

import math
import re
import time
from datetime import date, datetime
from typing import TYPE_CHECKING, Final

from chronos.config.logging import get_logger
from chronos.constants import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND
from chronos.core.calendar import (
    CalendarFields,
    compose,
    days_in_month,
    time_clip,
)

if TYPE_CHECKING:
    from chronos.core.types import DateLike

logger = get_logger(__name__)

_ISO_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    (?P<year>[+-]\d{6}|\d{4})
    (?:-(?P<month>\d{2})
        (?:-(?P<day>\d{2}))?
    )?
    (?:[Tt ]
        (?P<hour>\d{2}):(?P<minute>\d{2})
        (?::(?P<second>\d{2})
            (?:[.,](?P<fraction>\d{1,9}))?
        )?
        (?P<offset>[Zz]|[+-]\d{2}(?::?\d{2})?)?
    )?
    $
    """,
    re.VERBOSE,
)


def now_ms() -> int:
    """Return the current wall clock as epoch milliseconds."""
    return time.time_ns() // 1_000_000


def _parse_offset(token: str) -> int:
    """Return the offset in milliseconds for ``Z`` / ``+HH`` / ``+HHMM`` / ``+HH:MM``."""
    if token in ("Z", "z"):
        return 0
    sign = -1 if token[0] == "-" else 1
    digits = token[1:].replace(":", "")
    hours = int(digits[:2])
    minutes = int(digits[2:4]) if len(digits) > 2 else 0
    if hours > 23 or minutes > 59:
        raise ValueError(f"offset out of range: {token!r}")
    return sign * (hours * MS_PER_HOUR + minutes * MS_PER_MINUTE)


def parse_iso(text: str) -> int | None:
    """Parse an ISO-8601 string into an instant, or return None if malformed.

    Date-only forms (``YYYY``, ``YYYY-MM``, ``YYYY-MM-DD``) are UTC. Date-time
    forms without an offset are local time. ``24:00`` is accepted as the end of
    a day; extended years (``+YYYYYY``) are supported, ``-000000`` is not.
    """
    m = _ISO_RE.match(text.strip())
    if m is None:
        logger.trace("not an ISO-8601 string: %r", text)
        return None
    if m.group("year") == "-000000":
        return None

    year = int(m.group("year"))
    month = int(m.group("month") or 1)
    day = int(m.group("day") or 1)
    has_time = m.group("hour") is not None
    hour = int(m.group("hour") or 0)
    minute = int(m.group("minute") or 0)
    second = int(m.group("second") or 0)
    millisecond = int((m.group("fraction") or "0").ljust(3, "0")[:3])

    if not 1 <= month <= 12 or not 1 <= day <= days_in_month(year, month - 1):
        return None
    if minute > 59 or second > 59:
        return None
    if hour > 24 or (hour == 24 and (minute or second or millisecond)):
        return None

    offset = m.group("offset")
    fields = CalendarFields(year, month - 1, day, hour, minute, second, millisecond)
    if offset is not None:
        try:
            offset_ms = _parse_offset(offset)
        except ValueError:
            return None
        utc_ms = compose(fields, utc=True)
        return None if utc_ms is None else time_clip(utc_ms - offset_ms)
    # Date-only forms are UTC; date-time forms without an offset are local
    return compose(fields, utc=not has_time)


def from_number(value: float) -> int | None:
    """Return an instant from epoch milliseconds (truncated), or None if not finite/out of range."""
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        value = math.trunc(value)
    return time_clip(int(value))


def from_datetime(value: datetime) -> int | None:
    """Return the instant of an aware datetime, or of a naive one read as local time."""
    fields = CalendarFields(
        value.year,
        value.month - 1,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond // 1000,
    )
    offset = value.utcoffset()
    if offset is None:
        return compose(fields, utc=False)
    utc_ms = compose(fields, utc=True)
    if utc_ms is None:
        return None
    return time_clip(utc_ms - (offset.days * MS_PER_DAY + offset.seconds * MS_PER_SECOND))


def to_instant(value: DateLike) -> int | None:
    """Coerce a date-like value into an instant (None when invalid).

    Args:
        value (DateLike): The input to coerce.

    Returns:
        int | None: Epoch milliseconds, or None for the invalid instant.

    Raises:
        TypeError: If ``value`` is of an unsupported type.
    """
    if value is None:
        return now_ms()
    if isinstance(value, bool):
        raise TypeError("bool is not a date-like value")
    if isinstance(value, str):
        return parse_iso(value)
    if isinstance(value, (int, float)):
        return from_number(value)
    if isinstance(value, datetime):
        return from_datetime(value)
    if isinstance(value, date):
        return compose(CalendarFields(value.year, value.month - 1, value.day), utc=True)
    value_of = getattr(value, "value_of", None)
    if callable(value_of):
        ms = value_of()
        return ms if isinstance(ms, int) else None
    raise TypeError(f"Unsupported date-like value of type {type(value).__name__}")
