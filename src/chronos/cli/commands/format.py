# topmark:header:start
#
#   project      : Chronos
#   file         : format.py
#   file_relpath : src/chronos/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chronos `format` command: render a date with a pattern."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chronos.cli.cmd_common import get_console, parse_date_argument, resolve_config
from chronos.cli.options import common_config_options, pattern_option

if TYPE_CHECKING:
    from pathlib import Path


@click.command(
    name="format",
    help="Render DATE (default: now) with a pattern such as 'YYYY-MM-DD HH:mm:ss'.",
)
@click.argument("date", required=False)
@pattern_option
@common_config_options
def format_command(
    *,
    date: str | None,
    pattern: str | None,
    config_files: tuple[Path, ...],
    no_config: bool,
    utc: bool | None,
) -> None:
    """Print DATE rendered with the effective pattern."""
    console = get_console(click.get_current_context())
    config = resolve_config(
        config_files=config_files, no_config=no_config, utc=utc, pattern=pattern
    )
    value = parse_date_argument(date, utc=config.utc)
    console.print(value.format(config.format_pattern))
