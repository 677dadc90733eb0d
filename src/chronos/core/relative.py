# topmark:header:start
#
#   project      : Chronos
#   file         : relative.py
#   file_relpath : src/chronos/core/relative.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable relative time phrases ("3 days ago", "in an hour").

Buckets are selected on the absolute difference in milliseconds. Each bucket
either renders a fixed phrase or ``N <unit>s`` where ``N`` is the integer
quotient of the difference by the bucket's unit length. Months and years are
fixed 30- and 365-day lengths here; calendar-accurate spans are what
`Chronos.diff` is for.
"""

from __future__ import annotations

from typing import Final, NamedTuple

from chronos.constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    MS_PER_WEEK,
)

JUST_NOW: Final[str] = "just now"

_MS_PER_MONTH: Final[int] = 30 * MS_PER_DAY
_MS_PER_YEAR: Final[int] = 365 * MS_PER_DAY


class Bucket(NamedTuple):
    """A half-open bucket ``[previous limit, limit)`` and how to phrase it."""

    limit: int
    phrase: str | None
    unit_ms: int = 1
    unit_name: str = ""


BUCKETS: Final[tuple[Bucket, ...]] = (
    Bucket(10 * MS_PER_SECOND, JUST_NOW),
    Bucket(MS_PER_MINUTE, None, MS_PER_SECOND, "seconds"),
    Bucket(2 * MS_PER_MINUTE, "a minute"),
    Bucket(MS_PER_HOUR, None, MS_PER_MINUTE, "minutes"),
    Bucket(2 * MS_PER_HOUR, "an hour"),
    Bucket(MS_PER_DAY, None, MS_PER_HOUR, "hours"),
    Bucket(2 * MS_PER_DAY, "a day"),
    Bucket(MS_PER_WEEK, None, MS_PER_DAY, "days"),
    Bucket(2 * MS_PER_WEEK, "a week"),
    Bucket(_MS_PER_MONTH, None, MS_PER_WEEK, "weeks"),
    Bucket(2 * _MS_PER_MONTH, "a month"),
    Bucket(_MS_PER_YEAR, None, _MS_PER_MONTH, "months"),
    Bucket(2 * _MS_PER_YEAR, "a year"),
)


def span_phrase(abs_diff_ms: int) -> str:
    """Return the undirected phrase for a non-negative difference ("5 minutes", "a day")."""
    for bucket in BUCKETS:
        if abs_diff_ms < bucket.limit:
            if bucket.phrase is not None:
                return bucket.phrase
            return f"{abs_diff_ms // bucket.unit_ms} {bucket.unit_name}"
    return f"{abs_diff_ms // _MS_PER_YEAR} years"


def relative_phrase(diff_ms: int) -> str:
    """Return the directed phrase for ``diff_ms`` = subject - reference.

    Positive differences are in the future (``"in 3 days"``), negative or zero
    ones in the past (``"3 days ago"``). The "just now" bucket has no direction.
    """
    text = span_phrase(abs(diff_ms))
    if text == JUST_NOW:
        return text
    return f"in {text}" if diff_ms > 0 else f"{text} ago"
