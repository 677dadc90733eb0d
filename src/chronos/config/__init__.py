# topmark:header:start
#
#   project      : Chronos
#   file         : __init__.py
#   file_relpath : src/chronos/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for Chronos.

Public names:
    - `Config` / `MutableConfig`: immutable runtime config and its builder.
    - `ChronosConfigError`: raised for unreadable or malformed config sources.
"""

from __future__ import annotations

from chronos.config.errors import ChronosConfigError
from chronos.config.model import Config, MutableConfig

__all__ = [
    "ChronosConfigError",
    "Config",
    "MutableConfig",
]
