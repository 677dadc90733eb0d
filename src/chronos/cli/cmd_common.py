# topmark:header:start
#
#   project      : Chronos
#   file         : cmd_common.py
#   file_relpath : src/chronos/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by Chronos subcommands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chronos.cli.errors import ChronosConfigFileError, ChronosInvalidDateError
from chronos.config import ChronosConfigError, MutableConfig
from chronos.config.logging import get_logger
from chronos.core.chronos import Chronos, from_unix_seconds

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from chronos.cli.console import ConsoleLike
    from chronos.config import Config

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the group context."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (0 = terse) stored on the context."""
    return int(ctx.obj.get("verbosity_level", 0))


def resolve_config(
    *,
    config_files: Iterable[Path] = (),
    no_config: bool = False,
    utc: bool | None = None,
    pattern: str | None = None,
) -> Config:
    """Merge discovered/explicit config files with CLI overrides into a `Config`.

    Raises:
        ChronosConfigFileError: If a config source is unreadable or malformed.
    """
    try:
        draft = MutableConfig.load_merged(
            extra_config_files=config_files,
            no_config=no_config,
        )
    except ChronosConfigError as exc:
        raise ChronosConfigFileError(str(exc)) from exc
    config = draft.apply_overrides(format_pattern=pattern, utc=utc).freeze()
    logger.debug("Effective config: %s", config)
    return config


def parse_date_argument(value: str | None, *, utc: bool) -> Chronos:
    """Turn a DATE argument into a `Chronos`.

    Accepted forms: omitted or ``now`` (current time), ``@SECONDS`` (Unix epoch seconds),
    or an ISO-8601 date / date-time.

    Raises:
        ChronosInvalidDateError: If the argument does not describe a valid point in time.
    """
    if value is None or value.strip().lower() == "now":
        return Chronos(None, utc)
    if value.startswith("@"):
        try:
            seconds = float(value[1:])
        except ValueError:
            raise ChronosInvalidDateError(f"Invalid Unix timestamp: {value!r}") from None
        result = from_unix_seconds(seconds, utc)
    else:
        result = Chronos(value, utc)
    if not result.is_valid():
        raise ChronosInvalidDateError(f"Invalid date: {value!r}")
    return result
