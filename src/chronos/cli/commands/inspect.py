# topmark:header:start
#
#   project      : Chronos
#   file         : inspect.py
#   file_relpath : src/chronos/cli/commands/inspect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chronos `inspect` command: show calendar fields and derived facts of a date."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from chronos.cli.cli_types import EnumChoiceParam, OutputFormat
from chronos.cli.cmd_common import get_console, parse_date_argument, resolve_config
from chronos.cli.options import common_config_options

if TYPE_CHECKING:
    from pathlib import Path

    from chronos.core.chronos import Chronos


def describe(value: Chronos) -> dict[str, Any]:
    """Return the fields and derived facts of ``value`` as a JSON-ready dict."""
    return {
        "iso": value.to_iso_string(),
        "epoch_ms": value.value_of(),
        "unix": value.unix_seconds(),
        "mode": "utc" if value.is_utc_mode() else "local",
        "year": value.year(),
        "month": value.month() + 1,
        "date": value.date(),
        "weekday": value.day(),
        "hour": value.hour(),
        "minute": value.minute(),
        "second": value.second(),
        "millisecond": value.millisecond(),
        "week": value.week(),
        "leap_year": value.is_leap_year(),
        "days_in_month": value.days_in_month(),
        "days_in_year": value.days_in_year(),
    }


@click.command(
    name="inspect",
    help="Show the calendar fields, week number, leap year and month length of DATE.",
)
@click.argument("date", required=False)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@common_config_options
def inspect_command(
    *,
    date: str | None,
    output_format: OutputFormat | None,
    config_files: tuple[Path, ...],
    no_config: bool,
    utc: bool | None,
) -> None:
    """Print a description of DATE."""
    console = get_console(click.get_current_context())
    config = resolve_config(config_files=config_files, no_config=no_config, utc=utc)
    facts = describe(parse_date_argument(date, utc=config.utc))

    if output_format == OutputFormat.JSON:
        console.print(json.dumps(facts))
        return
    width = max(len(k) for k in facts)
    for key, val in facts.items():
        console.print(f"{console.styled(key.ljust(width), bold=True)} : {val}")
