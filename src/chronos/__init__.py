# topmark:header:start
#
#   project      : Chronos
#   file         : __init__.py
#   file_relpath : src/chronos/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chronos package.

Chronos is an immutable date/time value with calendar-aware arithmetic,
unit-aware comparisons, pattern formatting and human-readable relative times.
It also ships a small ``chronos`` command line tool.

Example:
    ```python
    import chronos

    d = chronos.create("2024-06-15")
    d.add(1, "month").format()           # '2024-07-15'
    d.end_of("month").format("D HH:mm")  # '30 23:59'
    ```
"""

from __future__ import annotations

from chronos.core import (
    Chronos,
    DateLike,
    Inclusivity,
    Unit,
    UnitLike,
    create,
    from_unix_seconds,
    now,
    utc_of,
)

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
