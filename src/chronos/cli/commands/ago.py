# topmark:header:start
#
#   project      : Chronos
#   file         : ago.py
#   file_relpath : src/chronos/cli/commands/ago.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chronos `ago` command: human-readable relative time."""

from __future__ import annotations

import click

from chronos.cli.cmd_common import get_console, parse_date_argument


@click.command(
    name="ago",
    help="Describe DATE relative to now (or to --since), e.g. '3 days ago' or 'in an hour'.",
)
@click.argument("date")
@click.option(
    "--since",
    "since",
    type=str,
    default=None,
    help="Reference date instead of now.",
)
def ago_command(*, date: str, since: str | None) -> None:
    """Print the relative phrase for DATE."""
    console = get_console(click.get_current_context())
    value = parse_date_argument(date, utc=False)
    if since is None:
        console.print(value.from_now())
    else:
        console.print(value.from_(parse_date_argument(since, utc=False)))
