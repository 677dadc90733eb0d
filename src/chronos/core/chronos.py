# topmark:header:start
#
#   project      : Chronos
#   file         : chronos.py
#   file_relpath : src/chronos/core/chronos.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable calendar value.

A `Chronos` wraps one instant (epoch milliseconds) and a mode flag selecting
whether calendar fields are read and written in UTC or in host local time.
Every operation that looks like a mutation returns a new instance.

Malformed input never raises: it produces an *invalid* value which flows
through arithmetic, comparisons and formatting and can be detected with
`Chronos.is_valid`. String renderings of an invalid value are ``"Invalid Date"``,
numeric results are ``math.nan``.

Example:
    ```python
    from chronos import create

    date = create("2024-06-15")
    next_month = date.add(1, "month")
    date.format()        # '2024-06-15' (unchanged)
    next_month.format()  # '2024-07-15'
    ```
"""

from __future__ import annotations

import math
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any, Final, NoReturn, cast

from chronos.config.logging import get_logger
from chronos.constants import DEFAULT_FORMAT_PATTERN, INVALID_DATE_TEXT, MS_PER_DAY, MS_PER_SECOND
from chronos.core.calendar import (
    CalendarFields,
    compose,
    decompose,
    days_in_month,
    is_leap_year,
    local_zone_name,
    time_clip,
    utc_offset_ms,
)
from chronos.core.formatting import display_string, format_fields, iso_string
from chronos.core.parsing import to_instant
from chronos.core.relative import relative_phrase
from chronos.core.types import INCLUSIVITY_VALUES
from chronos.core.units import Unit

if TYPE_CHECKING:
    from chronos.core.types import DateLike, Inclusivity
    from chronos.core.units import UnitLike

logger = get_logger(__name__)

_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Time of day reset by start_of(unit) / saturated by end_of(unit) for calendar units
_TIME_FLOOR: Final[dict[str, int]] = {"hour": 0, "minute": 0, "second": 0, "millisecond": 0}
_TIME_CEIL: Final[dict[str, int]] = {"hour": 23, "minute": 59, "second": 59, "millisecond": 999}

# Units of fixed length floored on the instant itself, so a wall time repeated
# by a DST fall-back still lands inside its own hour
_CLOCK_UNITS: Final[frozenset[Unit]] = frozenset(
    {Unit.HOUR, Unit.MINUTE, Unit.SECOND, Unit.MILLISECOND}
)


def _as_int(value: float) -> int | None:
    """Truncate a numeric argument toward zero; None for NaN/infinities."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected a number, got {type(value).__name__}")
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return math.trunc(value)
    return value


class Chronos:
    """Immutable point in time with a UTC/local field mode.

    Args:
        value (DateLike): What to build the value from; ``None`` means now.
            See `chronos.core.parsing` for accepted shapes.
        utc (bool): If True, calendar fields are read and written in UTC.

    Raises:
        TypeError: If ``value`` is not a date-like type.
    """

    __slots__ = ("_instant", "_utc")

    _instant: int | None
    _utc: bool

    def __init__(self, value: DateLike = None, utc: bool = False) -> None:
        instant = to_instant(value)
        if instant is None:
            logger.debug("invalid date-like input: %r", value)
        object.__setattr__(self, "_instant", instant)
        object.__setattr__(self, "_utc", bool(utc))

    @classmethod
    def from_instant(cls, instant: int | None, utc: bool = False) -> Chronos:
        """Wrap an already computed instant (None for invalid) without parsing."""
        obj = object.__new__(cls)
        object.__setattr__(obj, "_instant", instant)
        object.__setattr__(obj, "_utc", utc)
        return obj

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (Chronos.from_instant, (self._instant, self._utc))

    # --- internal helpers ---

    def _derive(self, instant: int | None) -> Chronos:
        return Chronos.from_instant(instant, self._utc)

    def _fields(self) -> CalendarFields:
        # Callers check validity first
        return decompose(cast("int", self._instant), utc=self._utc)

    def _with_fields(self, **changes: int) -> Chronos:
        """Clone the calendar fields, apply ``changes`` and wrap the recomposed instant."""
        if self._instant is None:
            return self._derive(None)
        return self._derive(compose(replace(self._fields(), **changes), utc=self._utc))

    def _field(self, name: str) -> int | float:
        if self._instant is None:
            return math.nan
        return getattr(self._fields(), name)

    def _set(self, name: str, value: float) -> Chronos:
        number = _as_int(value)
        if number is None:
            return self._derive(None)
        return self._with_fields(**{name: number})

    def _clock_floor(self, unit: Unit) -> int:
        """Return the first instant of the clock ``unit`` containing this (valid) value."""
        instant = cast("int", self._instant)
        offset = 0 if self._utc else utc_offset_ms(instant)
        return instant - (instant + offset) % cast("int", unit.fixed_ms)

    @staticmethod
    def _coerce(other: DateLike) -> Chronos:
        return other if isinstance(other, Chronos) else Chronos(other)

    # --- field accessors ---

    def year(self) -> int | float:
        """Full year."""
        return self._field("year")

    def month(self) -> int | float:
        """Month index, 0-11."""
        return self._field("month")

    def date(self) -> int | float:
        """Day of month, 1-31."""
        return self._field("date")

    def day(self) -> int | float:
        """Day of week, 0 (Sunday) - 6 (Saturday)."""
        return self._field("weekday")

    def hour(self) -> int | float:
        """Hour, 0-23."""
        return self._field("hour")

    def minute(self) -> int | float:
        """Minute, 0-59."""
        return self._field("minute")

    def second(self) -> int | float:
        """Second, 0-59."""
        return self._field("second")

    def millisecond(self) -> int | float:
        """Millisecond, 0-999."""
        return self._field("millisecond")

    # --- field setters ---

    def set_year(self, value: float) -> Chronos:
        """Return a copy with the year replaced."""
        return self._set("year", value)

    def set_month(self, value: float) -> Chronos:
        """Return a copy with the month (0-11, rolls over) replaced."""
        return self._set("month", value)

    def set_date(self, value: float) -> Chronos:
        """Return a copy with the day of month (rolls over) replaced."""
        return self._set("date", value)

    def set_hour(self, value: float) -> Chronos:
        """Return a copy with the hour replaced."""
        return self._set("hour", value)

    def set_minute(self, value: float) -> Chronos:
        """Return a copy with the minute replaced."""
        return self._set("minute", value)

    def set_second(self, value: float) -> Chronos:
        """Return a copy with the second replaced."""
        return self._set("second", value)

    def set_millisecond(self, value: float) -> Chronos:
        """Return a copy with the millisecond replaced."""
        return self._set("millisecond", value)

    # --- arithmetic ---

    def add(self, amount: float, unit: UnitLike) -> Chronos:
        """Return a copy moved by ``amount`` units (negative amounts move backwards).

        Calendar fields are incremented and recomposed, so adding one month to
        January 31 rolls over into March rather than clamping to February's last day,
        and adding days in local mode keeps the wall clock time across DST changes.

        Args:
            amount (float): Number of units (truncated toward zero).
            unit (UnitLike): The unit to add.

        Returns:
            Chronos: The shifted value.
        """
        u = Unit.parse(unit)
        n = _as_int(amount)
        if n is None or self._instant is None:
            return self._derive(None)
        f = self._fields()
        if u is Unit.YEAR:
            return self._with_fields(year=f.year + n)
        if u is Unit.MONTH:
            return self._with_fields(month=f.month + n)
        if u is Unit.WEEK:
            return self._with_fields(date=f.date + 7 * n)
        if u is Unit.DAY:
            return self._with_fields(date=f.date + n)
        if u is Unit.HOUR:
            return self._with_fields(hour=f.hour + n)
        if u is Unit.MINUTE:
            return self._with_fields(minute=f.minute + n)
        if u is Unit.SECOND:
            return self._with_fields(second=f.second + n)
        return self._with_fields(millisecond=f.millisecond + n)

    def subtract(self, amount: float, unit: UnitLike) -> Chronos:
        """Equivalent to ``add(-amount, unit)``."""
        return self.add(-amount, unit)

    def start_of(self, unit: UnitLike) -> Chronos:
        """Return the first millisecond of the ``unit`` containing this value.

        Weeks start on Sunday. ``millisecond`` returns an equal value.
        """
        u = Unit.parse(unit)
        if self._instant is None:
            return self._derive(None)
        if u in _CLOCK_UNITS:
            return self._derive(time_clip(self._clock_floor(u)))
        changes: dict[str, int] = dict(_TIME_FLOOR)
        f = self._fields()
        if u is Unit.YEAR:
            changes.update(month=0, date=1)
        elif u is Unit.MONTH:
            changes.update(date=1)
        elif u is Unit.WEEK:
            changes.update(date=f.date - f.weekday)
        return self._with_fields(**changes)

    def end_of(self, unit: UnitLike) -> Chronos:
        """Return the last millisecond of the ``unit`` containing this value.

        Weeks end on Saturday. ``millisecond`` returns an equal value.
        """
        u = Unit.parse(unit)
        if self._instant is None:
            return self._derive(None)
        if u in _CLOCK_UNITS:
            size = cast("int", u.fixed_ms)
            return self._derive(time_clip(self._clock_floor(u) + size - 1))
        changes: dict[str, int] = dict(_TIME_CEIL)
        f = self._fields()
        if u is Unit.YEAR:
            changes.update(month=11, date=31)
        elif u is Unit.MONTH:
            # Day 0 of the next month is the last day of this one
            changes.update(month=f.month + 1, date=0)
        elif u is Unit.WEEK:
            changes.update(date=f.date + (6 - f.weekday))
        return self._with_fields(**changes)

    # --- comparisons ---

    def is_before(self, other: DateLike, unit: UnitLike | None = None) -> bool:
        """True if this value ends before ``other`` starts (at ``unit`` granularity)."""
        o = self._coerce(other)
        if unit is None:
            a, b = self._instant, o._instant
        else:
            a, b = self.end_of(unit)._instant, o.start_of(unit)._instant
        return a is not None and b is not None and a < b

    def is_after(self, other: DateLike, unit: UnitLike | None = None) -> bool:
        """True if this value starts after ``other`` ends (at ``unit`` granularity)."""
        o = self._coerce(other)
        if unit is None:
            a, b = self._instant, o._instant
        else:
            a, b = self.start_of(unit)._instant, o.end_of(unit)._instant
        return a is not None and b is not None and a > b

    def is_same(self, other: DateLike, unit: UnitLike | None = None) -> bool:
        """True if both values fall in the same ``unit`` (same instant when ``unit`` is None)."""
        o = self._coerce(other)
        if unit is None:
            a, b = self._instant, o._instant
        else:
            a, b = self.start_of(unit)._instant, o.start_of(unit)._instant
        return a is not None and a == b

    def is_same_or_before(self, other: DateLike, unit: UnitLike | None = None) -> bool:
        """``is_same`` or ``is_before``."""
        return self.is_same(other, unit) or self.is_before(other, unit)

    def is_same_or_after(self, other: DateLike, unit: UnitLike | None = None) -> bool:
        """``is_same`` or ``is_after``."""
        return self.is_same(other, unit) or self.is_after(other, unit)

    def is_between(
        self,
        start: DateLike,
        end: DateLike,
        unit: UnitLike | None = None,
        inclusivity: Inclusivity = "()",
    ) -> bool:
        """True if this value lies between ``start`` and ``end``.

        Args:
            start (DateLike): Lower bound.
            end (DateLike): Upper bound.
            unit (UnitLike | None): Comparison granularity; None compares instants.
            inclusivity (Inclusivity): ``'['``/``']'`` make the start/end bound inclusive,
                ``'('``/``')'`` exclusive. Defaults to ``'()'``.

        Returns:
            bool: Whether the value is inside the range.

        Raises:
            ValueError: If ``inclusivity`` is not one of ``()``, ``[]``, ``[)``, ``(]``.
        """
        if inclusivity not in INCLUSIVITY_VALUES:
            raise ValueError(f"Invalid inclusivity {inclusivity!r}")
        after_start = (
            self.is_same_or_after(start, unit)
            if inclusivity[0] == "["
            else self.is_after(start, unit)
        )
        before_end = (
            self.is_same_or_before(end, unit)
            if inclusivity[1] == "]"
            else self.is_before(end, unit)
        )
        return after_start and before_end

    # --- derived queries ---

    def is_valid(self) -> bool:
        """True unless the value is the invalid instant."""
        return self._instant is not None

    def is_leap_year(self) -> bool:
        """True if the value's year is a Gregorian leap year (False when invalid)."""
        if self._instant is None:
            return False
        return is_leap_year(self._fields().year)

    def days_in_month(self) -> int | float:
        """Number of days in the value's month."""
        if self._instant is None:
            return math.nan
        f = self._fields()
        return days_in_month(f.year, f.month)

    def days_in_year(self) -> int | float:
        """365 or 366."""
        if self._instant is None:
            return math.nan
        return 366 if self.is_leap_year() else 365

    def week(self) -> int | float:
        """Week of the year, ``ceil((days since Jan 1 + weekday of Jan 1 + 1) / 7)``.

        Weeks are Sunday-based and week 1 is the week containing January 1; this
        is not ISO-8601 week numbering.
        """
        if self._instant is None:
            return math.nan
        jan1 = compose(CalendarFields(self._fields().year, 0, 1), utc=self._utc)
        if jan1 is None:
            return math.nan
        days = (self._instant - jan1) // MS_PER_DAY
        offset = decompose(jan1, utc=self._utc).weekday
        return -(-(days + offset + 1) // 7)

    # --- difference ---

    def diff(
        self,
        other: DateLike,
        unit: UnitLike = Unit.MILLISECOND,
        precise: bool = False,
    ) -> int | float:
        """Signed difference ``self - other`` expressed in ``unit``.

        Months and years are calendar-accurate: whole months are counted first and the
        remainder is measured against the surrounding month-aligned anchors. Other units
        divide the millisecond delta by the unit's fixed length.

        Args:
            other (DateLike): The value to subtract.
            unit (UnitLike): Result unit. Defaults to milliseconds.
            precise (bool): If True, return the fractional value; otherwise truncate toward zero.

        Returns:
            int | float: The difference, or ``math.nan`` if either value is invalid.

        Example:
            ```python
            create("2024-06-15").diff("2024-01-01", "month")  # 5
            ```
        """
        u = Unit.parse(unit)
        o = self._coerce(other)
        if self._instant is None or o._instant is None:
            return math.nan
        if u is Unit.YEAR or u is Unit.MONTH:
            result: float = self._month_diff(o)
            if u is Unit.YEAR:
                result /= 12
        elif u is Unit.MILLISECOND:
            return self._instant - o._instant
        else:
            result = (self._instant - o._instant) / u.fixed_ms  # type: ignore[operator]
        if math.isnan(result) or precise:
            return result
        return math.trunc(result)

    def _month_diff(self, other: Chronos) -> float:
        a, b = self._fields(), other._fields()
        months = (a.year - b.year) * 12 + (a.month - b.month)
        anchor = other.add(months, Unit.MONTH)._instant
        if anchor is None or self._instant is None:
            return math.nan
        adjust = self._instant - anchor
        step = 1 if adjust >= 0 else -1
        anchor_next = other.add(months + step, Unit.MONTH)._instant
        if anchor_next is None or anchor_next == anchor:
            return math.nan
        return months + adjust / (anchor_next - anchor) * step

    # --- relative time ---

    def from_(self, other: DateLike) -> str:
        """Relative phrase from ``other`` to this value, e.g. ``"3 days ago"``."""
        o = self._coerce(other)
        if self._instant is None or o._instant is None:
            return INVALID_DATE_TEXT
        return relative_phrase(self._instant - o._instant)

    def from_now(self) -> str:
        """Relative phrase from the current moment to this value."""
        return self.from_(Chronos())

    def to(self, other: DateLike) -> str:
        """Relative phrase from this value to ``other`` (mirror of `from_`)."""
        return self._coerce(other).from_(self)

    def to_now(self) -> str:
        """Relative phrase from this value to the current moment."""
        return Chronos().from_(self)

    # --- formatting ---

    def format(self, pattern: str = DEFAULT_FORMAT_PATTERN) -> str:
        """Render the value with ``pattern`` tokens (see `chronos.core.formatting`).

        Example:
            ```python
            create("2024-06-15T14:30:05.007Z").to_utc_mode().format("YYYY-MM-DD HH:mm:ss")
            # '2024-06-15 14:30:05'
            ```
        """
        if self._instant is None:
            return INVALID_DATE_TEXT
        return format_fields(self._fields(), pattern)

    # --- mode & representation ---

    def to_utc_mode(self) -> Chronos:
        """Same instant, fields read in UTC."""
        return Chronos.from_instant(self._instant, True)

    def to_local_mode(self) -> Chronos:
        """Same instant, fields read in host local time."""
        return Chronos.from_instant(self._instant, False)

    def is_utc_mode(self) -> bool:
        """True if fields are read in UTC."""
        return self._utc

    def to_native_date(self) -> datetime | None:
        """Return an aware `datetime` in the value's mode.

        Returns None for invalid values and for instants outside the range `datetime`
        can represent.
        """
        if self._instant is None:
            return None
        try:
            native = _EPOCH + timedelta(milliseconds=self._instant)
            return native if self._utc else native.astimezone()
        except (OverflowError, OSError, ValueError):
            logger.debug("instant %d is outside the datetime range", self._instant)
            return None

    def to_iso_string(self) -> str:
        """``YYYY-MM-DDTHH:mm:ss.sssZ`` (always UTC)."""
        if self._instant is None:
            return INVALID_DATE_TEXT
        return iso_string(decompose(self._instant, utc=True))

    def to_json(self) -> str:
        """Same as `to_iso_string`."""
        return self.to_iso_string()

    def value_of(self) -> int | float:
        """Epoch milliseconds (``math.nan`` when invalid)."""
        return math.nan if self._instant is None else self._instant

    def unix_seconds(self) -> int | float:
        """Epoch seconds, floored (``math.nan`` when invalid)."""
        return math.nan if self._instant is None else self._instant // MS_PER_SECOND

    def to_display_string(self) -> str:
        """Human-readable string, e.g. ``Sat Jun 15 2024 14:30:05 GMT+0000 (UTC)``."""
        if self._instant is None:
            return INVALID_DATE_TEXT
        if self._utc:
            return display_string(self._fields(), 0, "UTC")
        return display_string(
            self._fields(),
            utc_offset_ms(self._instant),
            local_zone_name(self._instant),
        )

    # --- Python protocols ---

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        mode = "utc" if self._utc else "local"
        return f"Chronos({self.to_iso_string()!r}, {mode})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chronos):
            return NotImplemented
        return self._instant is not None and self._instant == other._instant

    def __hash__(self) -> int:
        return hash(self._instant)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Chronos):
            return NotImplemented
        return self.is_before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Chronos):
            return NotImplemented
        return self.is_same_or_before(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Chronos):
            return NotImplemented
        return self.is_after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Chronos):
            return NotImplemented
        return self.is_same_or_after(other)


# --- factories ---


def create(value: DateLike = None, utc: bool = False) -> Chronos:
    """Build a `Chronos` from a date-like value (``None`` means now).

    Example:
        ```python
        now = create()
        date = create("2024-06-15")
        from_timestamp = create(1718438400000)
        ```
    """
    return Chronos(value, utc)


def utc_of(value: DateLike = None) -> Chronos:
    """Build a `Chronos` in UTC mode."""
    return Chronos(value, True)


def from_unix_seconds(seconds: float, utc: bool = False) -> Chronos:
    """Build a `Chronos` from epoch seconds."""
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise TypeError(f"Expected a number of seconds, got {type(seconds).__name__}")
    return Chronos(seconds * MS_PER_SECOND, utc)


def now(utc: bool = False) -> Chronos:
    """The current moment."""
    return Chronos(None, utc)
