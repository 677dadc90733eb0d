# topmark:header:start
#
#   project      : Chronos
#   file         : units.py
#   file_relpath : src/chronos/core/units.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Time units used to parameterize arithmetic, truncation and comparison.

`Unit` is a ``str`` enum so that plain strings (``"day"``) and members
(``Unit.DAY``) are interchangeable at the public API. Use `Unit.parse`
to normalize user input; it also accepts plural spellings (``"days"``).
"""

from __future__ import annotations

from enum import Enum
from typing import Final, Union

from chronos.constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    MS_PER_WEEK,
)


class Unit(str, Enum):
    """Calendar and clock units, from coarsest to finest."""

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"

    @classmethod
    def parse(cls, value: UnitLike) -> Unit:
        """Return the `Unit` for ``value``.

        Args:
            value (UnitLike): A `Unit` member or its (case-insensitive, optionally plural)
                string value.

        Returns:
            Unit: The matching member.

        Raises:
            ValueError: If ``value`` does not name a unit.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            token: str = value.strip().lower()
            member: Unit | None = _BY_TOKEN.get(token)
            if member is None and token.endswith("s"):
                member = _BY_TOKEN.get(token[:-1])
            if member is not None:
                return member
        raise ValueError(
            f"Unknown unit {value!r} (expected one of: {', '.join(u.value for u in cls)})"
        )

    @property
    def fixed_ms(self) -> int | None:
        """Fixed length in milliseconds, or None for calendar units (year, month)."""
        return FIXED_UNIT_MS.get(self)


UnitLike = Union[Unit, str]

_BY_TOKEN: Final[dict[str, Unit]] = {u.value: u for u in Unit}

FIXED_UNIT_MS: Final[dict[Unit, int]] = {
    Unit.WEEK: MS_PER_WEEK,
    Unit.DAY: MS_PER_DAY,
    Unit.HOUR: MS_PER_HOUR,
    Unit.MINUTE: MS_PER_MINUTE,
    Unit.SECOND: MS_PER_SECOND,
    Unit.MILLISECOND: 1,
}
