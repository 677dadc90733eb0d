# topmark:header:start
#
#   project      : Chronos
#   file         : model.py
#   file_relpath : src/chronos/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model: an immutable `Config` and its mutable builder.

Layers are merged with increasing precedence:

1. runtime defaults (`MutableConfig.from_defaults`),
2. project files discovered upward from the working directory
   (``pyproject.toml`` ``[tool.chronos]``, then ``chronos.toml``),
3. extra files passed explicitly (``--config``), in order,
4. overrides from the CLI or API.

Build and merge with `MutableConfig`, then `MutableConfig.freeze` into a `Config`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chronos.config.errors import ChronosConfigError
from chronos.config.io import (
    discover_config_files,
    extract_chronos_table,
    load_toml_dict,
)
from chronos.config.keys import KNOWN_KEYS, Toml
from chronos.config.logging import get_logger
from chronos.constants import DEFAULT_FORMAT_PATTERN

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from chronos.config.io import TomlTable
    from chronos.config.logging import ChronosLogger

logger: ChronosLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        format_pattern (str): Default pattern used when rendering dates.
        utc (bool): Whether calendar fields are read in UTC.
        config_files (tuple[Path | str, ...]): Sources merged into this config, in order.
    """

    format_pattern: str
    utc: bool
    config_files: tuple[Path | str, ...]

    def to_toml_dict(self) -> TomlTable:
        """Return the settings as a TOML-serializable dict (provenance excluded)."""
        return {
            Toml.KEY_FORMAT: self.format_pattern,
            Toml.KEY_UTC: self.utc,
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            format_pattern=self.format_pattern,
            utc=self.utc,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` means "not set by this layer" so that merging only overrides what a
    layer actually declares.
    """

    format_pattern: str | None = None
    utc: bool | None = None
    config_files: list[Path | str] = field(default_factory=list)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft holding the runtime defaults."""
        return cls(
            format_pattern=DEFAULT_FORMAT_PATTERN,
            utc=False,
            config_files=["<defaults>"],
        )

    @classmethod
    def from_toml_dict(cls, data: Mapping[str, Any], source: Path | str) -> MutableConfig:
        """Build a layer from a Chronos settings table.

        Args:
            data (Mapping[str, Any]): The settings table (top level of ``chronos.toml``
                or ``[tool.chronos]``).
            source (Path | str): Where the table came from, for provenance and messages.

        Returns:
            MutableConfig: The layer.

        Raises:
            ChronosConfigError: If a known key holds a value of the wrong type.
        """
        for key in data:
            if key not in KNOWN_KEYS:
                logger.debug("Ignoring unknown config key %r in %s", key, source)

        fmt: Any = data.get(Toml.KEY_FORMAT)
        if fmt is not None and not isinstance(fmt, str):
            raise ChronosConfigError(f"'{Toml.KEY_FORMAT}' in {source} must be a string")
        utc: Any = data.get(Toml.KEY_UTC)
        if utc is not None and not isinstance(utc, bool):
            raise ChronosConfigError(f"'{Toml.KEY_UTC}' in {source} must be a boolean")

        return cls(format_pattern=fmt, utc=utc, config_files=[source])

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a layer from ``path``; None for a ``pyproject.toml`` without ``[tool.chronos]``."""
        table = extract_chronos_table(path, load_toml_dict(path))
        if table is None:
            return None
        return cls.from_toml_dict(table, path)

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this one's."""
        return MutableConfig(
            format_pattern=(
                other.format_pattern if other.format_pattern is not None else self.format_pattern
            ),
            utc=other.utc if other.utc is not None else self.utc,
            config_files=[*self.config_files, *other.config_files],
        )

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            anchor (Path | None): Directory to start upward discovery from (CWD if None).
            extra_config_files (Iterable[Path] | None): Files merged after discovery.
            no_config (bool): If True, skip project discovery.

        Returns:
            MutableConfig: The merged draft.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            start: Path = anchor or Path.cwd()
            for cfg_path, table in discover_config_files(start):
                draft = draft.merge_with(cls.from_toml_dict(table, cfg_path))

        for extra in extra_config_files or ():
            layer = cls.from_toml_file(extra)
            if layer is None:
                logger.warning("No [tool.chronos] table in %s", extra)
                continue
            draft = draft.merge_with(layer)

        return draft

    def apply_overrides(
        self,
        *,
        format_pattern: str | None = None,
        utc: bool | None = None,
    ) -> MutableConfig:
        """Return a draft with CLI/API overrides applied (None leaves a value unchanged)."""
        return self.merge_with(
            MutableConfig(format_pattern=format_pattern, utc=utc, config_files=[])
        )

    def freeze(self) -> Config:
        """Return an immutable `Config`, filling unset values with defaults."""
        return Config(
            format_pattern=(
                self.format_pattern if self.format_pattern is not None else DEFAULT_FORMAT_PATTERN
            ),
            utc=bool(self.utc),
            config_files=tuple(self.config_files),
        )
