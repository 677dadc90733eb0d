# topmark:header:start
#
#   project      : Chronos
#   file         : diff.py
#   file_relpath : src/chronos/cli/commands/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chronos `diff` command: signed difference between two dates."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chronos.cli.cli_types import UnitParam
from chronos.cli.cmd_common import get_console, parse_date_argument, resolve_config
from chronos.cli.options import common_config_options
from chronos.core.units import Unit

if TYPE_CHECKING:
    from pathlib import Path


@click.command(
    name="diff",
    help="Print FIRST - SECOND in a unit (months and years are calendar-accurate).",
)
@click.argument("first")
@click.argument("second")
@click.option(
    "-u",
    "--unit",
    "unit",
    type=UnitParam(),
    default=Unit.MILLISECOND.value,
    show_default=True,
    help="Result unit.",
)
@click.option("--precise", is_flag=True, default=False, help="Keep the fractional part.")
@common_config_options
def diff_command(
    *,
    first: str,
    second: str,
    unit: Unit,
    precise: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
    utc: bool | None,
) -> None:
    """Print the difference between FIRST and SECOND."""
    console = get_console(click.get_current_context())
    config = resolve_config(config_files=config_files, no_config=no_config, utc=utc)
    a = parse_date_argument(first, utc=config.utc)
    b = parse_date_argument(second, utc=config.utc)
    console.print(str(a.diff(b, unit, precise)))
