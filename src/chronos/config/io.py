# topmark:header:start
#
#   project      : Chronos
#   file         : io.py
#   file_relpath : src/chronos/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

Parsing and rendering are done with `tomlkit`; loaders return plain ``dict``
structures so the model layer never sees tomlkit container types.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from chronos.config.errors import ChronosConfigError
from chronos.config.keys import Toml
from chronos.config.logging import get_logger
from chronos.constants import CHRONOS_TOML_NAME, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from chronos.config.logging import ChronosLogger

TomlTable = dict[str, Any]

logger: ChronosLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Parse the TOML file at ``path`` into a plain dict.

    Raises:
        ChronosConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ChronosConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ChronosConfigError(f"Invalid TOML in {path}: {exc}") from exc
    logger.debug("Loaded TOML from %s", path)
    return doc.unwrap()


def extract_chronos_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the Chronos settings held by ``data`` loaded from ``path``.

    For ``pyproject.toml`` this is the ``[tool.chronos]`` table (None when absent);
    for any other file it is the whole document.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    node: Any = data
    for part in PYPROJECT_TOOL_SECTION.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    if not isinstance(node, dict):
        raise ChronosConfigError(f"[{PYPROJECT_TOOL_SECTION}] in {path} must be a table")
    return node


def discover_config_files(anchor: Path) -> list[tuple[Path, TomlTable]]:
    """Return project config files, with their Chronos tables, root-most directory first.

    Within a directory, ``pyproject.toml`` (when it has a ``[tool.chronos]`` table) is
    listed before ``chronos.toml``. Discovery stops climbing at a directory whose config
    sets ``root = true``. Each file is parsed once; the returned tables are the
    ``[tool.chronos]`` table or the whole ``chronos.toml`` document.
    """
    found: list[list[tuple[Path, TomlTable]]] = []
    for directory in (anchor, *anchor.parents):
        level: list[tuple[Path, TomlTable]] = []
        stop = False
        for name in (PYPROJECT_TOML_NAME, CHRONOS_TOML_NAME):
            candidate: Path = directory / name
            if not candidate.is_file():
                continue
            table = extract_chronos_table(candidate, load_toml_dict(candidate))
            if table is None:
                continue
            level.append((candidate, table))
            stop = stop or table.get(Toml.KEY_ROOT) is True
        if level:
            found.append(level)
        if stop:
            logger.debug("Config discovery stopped at root %s", directory)
            break
    return [entry for level in reversed(found) for entry in level]


def to_toml(data: TomlTable) -> str:
    """Render ``data`` as TOML text, dropping ``None`` values (TOML has no null)."""
    clean: TomlTable = {k: v for k, v in data.items() if v is not None}
    return tomlkit.dumps(clean)
