# topmark:header:start
#
#   project      : Chronos
#   file         : version.py
#   file_relpath : src/chronos/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chronos `version` command.

Prints the current Chronos version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from chronos.cli.cli_types import EnumChoiceParam, OutputFormat
from chronos.cli.cmd_common import get_console, get_effective_verbosity
from chronos.constants import CHRONOS_VERSION


@click.command(
    name="version",
    help="Show the current version of Chronos.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Chronos."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": CHRONOS_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Chronos version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(CHRONOS_VERSION, bold=True)}")
    else:
        console.print(console.styled(CHRONOS_VERSION, bold=True))
