# topmark:header:start
#
#   project      : Chronos
#   file         : shift.py
#   file_relpath : src/chronos/cli/commands/shift.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chronos `shift` command: add (or subtract) an amount of a unit to a date."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chronos.cli.cli_types import UnitParam
from chronos.cli.cmd_common import get_console, parse_date_argument, resolve_config
from chronos.cli.options import common_config_options, pattern_option
from chronos.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from chronos.core.units import Unit

logger = get_logger(__name__)


@click.command(
    name="shift",
    help="Move DATE by AMOUNT UNITs; a negative AMOUNT moves backwards.",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("date")
@click.argument("amount", type=int)
@click.argument("unit", type=UnitParam())
@click.option("--iso", is_flag=True, default=False, help="Print an ISO-8601 UTC string.")
@pattern_option
@common_config_options
def shift_command(
    *,
    date: str,
    amount: int,
    unit: Unit,
    iso: bool,
    pattern: str | None,
    config_files: tuple[Path, ...],
    no_config: bool,
    utc: bool | None,
) -> None:
    """Print DATE shifted by AMOUNT UNITs."""
    console = get_console(click.get_current_context())
    config = resolve_config(
        config_files=config_files, no_config=no_config, utc=utc, pattern=pattern
    )
    shifted = parse_date_argument(date, utc=config.utc).add(amount, unit)
    logger.debug("shift %s by %d %s -> %r", date, amount, unit.value, shifted)
    console.print(shifted.to_iso_string() if iso else shifted.format(config.format_pattern))
