# topmark:header:start
#
#   project      : Chronos
#   file         : types.py
#   file_relpath : src/chronos/core/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared type aliases for the Chronos core."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Literal, Union

if TYPE_CHECKING:
    from chronos.core.chronos import Chronos

# Everything accepted where a point in time is expected
DateLike = Union["Chronos", str, int, float, datetime, date, None]

# Range inclusivity specifier for `Chronos.is_between`: '[' / ']' are inclusive
Inclusivity = Literal["()", "[]", "[)", "(]"]

INCLUSIVITY_VALUES: tuple[str, ...] = ("()", "[]", "[)", "(]")
