# topmark:header:start
#
#   project      : Chronos
#   file         : strategies_chronos.py
#   file_relpath : tests/strategies_chronos.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hypothesis strategies for Chronos property tests."""

from __future__ import annotations

from hypothesis import strategies as st

from chronos import Chronos, Unit
from chronos.core.calendar import days_from_civil

# 1900-01-01 .. 2100-12-31, well inside what the host `localtime()` supports
MIN_MS: int = days_from_civil(1900, 1, 1) * 86_400_000
MAX_MS: int = days_from_civil(2101, 1, 1) * 86_400_000 - 1

ALL_UNITS: list[Unit] = list(Unit)
FIXED_UNITS: list[Unit] = [u for u in Unit if u not in (Unit.YEAR, Unit.MONTH)]


def s_instant() -> st.SearchStrategy[int]:
    """Epoch milliseconds in the 1900-2100 range."""
    return st.integers(min_value=MIN_MS, max_value=MAX_MS)


def s_chronos(*, utc: bool | None = None) -> st.SearchStrategy[Chronos]:
    """Valid `Chronos` values; ``utc=None`` draws the mode too."""
    modes = st.just(utc) if utc is not None else st.booleans()
    return st.builds(Chronos.from_instant, s_instant(), modes)


def s_chronos_day_le_28(*, utc: bool | None = None) -> st.SearchStrategy[Chronos]:
    """Valid values whose day of month is at most 28 (month/year shifts never overflow)."""
    return s_chronos(utc=utc).filter(lambda c: c.date() <= 28)


def s_amount() -> st.SearchStrategy[int]:
    """Reasonable shift amounts, negative included."""
    return st.integers(min_value=-500, max_value=500)
