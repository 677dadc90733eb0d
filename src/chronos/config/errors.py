# topmark:header:start
#
#   project      : Chronos
#   file         : errors.py
#   file_relpath : src/chronos/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the configuration layer."""

from __future__ import annotations


class ChronosConfigError(ValueError):
    """A configuration source is unreadable, malformed, or has a wrongly typed value."""
