# topmark:header:start
#
#   project      : Chronos
#   file         : keys.py
#   file_relpath : src/chronos/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for Chronos configuration.

Keys live at the top level of ``chronos.toml`` or inside ``[tool.chronos]`` in
``pyproject.toml``. Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by Chronos configuration."""

    # Stop upward discovery at the directory holding this file
    KEY_ROOT: Final[str] = "root"

    # Default pattern for `format` / `shift` output
    KEY_FORMAT: Final[str] = "format"

    # Read and write calendar fields in UTC instead of local time
    KEY_UTC: Final[str] = "utc"


KNOWN_KEYS: Final[frozenset[str]] = frozenset({Toml.KEY_ROOT, Toml.KEY_FORMAT, Toml.KEY_UTC})
