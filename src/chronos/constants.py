# topmark:header:start
#
#   project      : Chronos
#   file         : constants.py
#   file_relpath : src/chronos/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chronos Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

CHRONOS_VERSION: str = get_version("chronos")

# Name of the project config file and the pyproject table it can live under:
CHRONOS_TOML_NAME: str = "chronos.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "tool.chronos"

CHRONOS_LOG_LEVEL_ENV: str = "CHRONOS_LOG_LEVEL"

DEFAULT_FORMAT_PATTERN: str = "YYYY-MM-DD"

# Text rendered for an invalid instant by every string-producing method
INVALID_DATE_TEXT: str = "Invalid Date"

MS_PER_SECOND: int = 1_000
MS_PER_MINUTE: int = 60 * MS_PER_SECOND
MS_PER_HOUR: int = 60 * MS_PER_MINUTE
MS_PER_DAY: int = 24 * MS_PER_HOUR
MS_PER_WEEK: int = 7 * MS_PER_DAY

# Largest representable instant magnitude (100 000 000 days either side of the epoch)
MAX_INSTANT_MS: int = 8_640_000_000_000_000
