# topmark:header:start
#
#   project      : Chronos
#   file         : __init__.py
#   file_relpath : src/chronos/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chronos core: the immutable calendar value and the pure helpers behind it."""

from __future__ import annotations

from chronos.core.chronos import Chronos, create, from_unix_seconds, now, utc_of
from chronos.core.types import DateLike, Inclusivity
from chronos.core.units import Unit, UnitLike

__all__ = [
    "Chronos",
    "DateLike",
    "Inclusivity",
    "Unit",
    "UnitLike",
    "create",
    "from_unix_seconds",
    "now",
    "utc_of",
]
