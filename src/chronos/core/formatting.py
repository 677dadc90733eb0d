# topmark:header:start
#
#   project      : Chronos
#   file         : formatting.py
#   file_relpath : src/chronos/core/formatting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render calendar fields as text.

Pattern tokens (longest match wins at each position, everything else is copied):

    =====  ======================================
    Token  Output
    =====  ======================================
    YYYY   4-digit year
    YY     last 2 digits of the year
    MM     zero-padded month (01-12)
    M      month (1-12)
    DD     zero-padded day of month
    D      day of month
    HH     zero-padded hour (00-23)
    H      hour (0-23)
    mm     zero-padded minute
    ss     zero-padded second
    SSS    zero-padded millisecond
    =====  ======================================
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Callable, Final

if TYPE_CHECKING:
    from chronos.core.calendar import CalendarFields

_WEEKDAY_NAMES: Final[tuple[str, ...]] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_MONTH_NAMES: Final[tuple[str, ...]] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

_TOKENS: Final[dict[str, Callable[[CalendarFields], str]]] = {
    "YYYY": lambda f: str(f.year),
    "YY": lambda f: str(f.year)[-2:],
    "MM": lambda f: f"{f.month + 1:02d}",
    "M": lambda f: str(f.month + 1),
    "DD": lambda f: f"{f.date:02d}",
    "D": lambda f: str(f.date),
    "HH": lambda f: f"{f.hour:02d}",
    "H": lambda f: str(f.hour),
    "mm": lambda f: f"{f.minute:02d}",
    "ss": lambda f: f"{f.second:02d}",
    "SSS": lambda f: f"{f.millisecond:03d}",
}

# Alternation sorted longest-first so "YYYY" is never consumed as two "YY"
_TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    "|".join(sorted(_TOKENS, key=len, reverse=True))
)


def format_fields(fields: CalendarFields, pattern: str) -> str:
    """Substitute the tokens of ``pattern`` with values from ``fields``."""
    return _TOKEN_RE.sub(lambda m: _TOKENS[m.group(0)](fields), pattern)


def _iso_year(year: int) -> str:
    if 0 <= year <= 9999:
        return f"{year:04d}"
    return f"{'-' if year < 0 else '+'}{abs(year):06d}"


def iso_string(fields: CalendarFields) -> str:
    """Return ``YYYY-MM-DDTHH:mm:ss.sssZ`` for UTC ``fields`` (extended years as ``±YYYYYY``)."""
    return (
        f"{_iso_year(fields.year)}-{fields.month + 1:02d}-{fields.date:02d}"
        f"T{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}"
        f".{fields.millisecond:03d}Z"
    )


def _gmt_offset(offset_ms: int) -> str:
    sign = "-" if offset_ms < 0 else "+"
    minutes = abs(offset_ms) // 60_000
    return f"GMT{sign}{minutes // 60:02d}{minutes % 60:02d}"


def display_string(fields: CalendarFields, offset_ms: int, zone_name: str) -> str:
    """Return a human-readable string such as ``Sat Jun 15 2024 14:30:05 GMT+0000 (UTC)``."""
    year = f"{fields.year:04d}" if fields.year >= 0 else f"-{abs(fields.year):04d}"
    return (
        f"{_WEEKDAY_NAMES[fields.weekday]} {_MONTH_NAMES[fields.month]} {fields.date:02d} {year} "
        f"{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d} "
        f"{_gmt_offset(offset_ms)} ({zone_name})"
    )
