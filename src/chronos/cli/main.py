# topmark:header:start
#
#   project      : Chronos
#   file         : main.py
#   file_relpath : src/chronos/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chronos command-line interface.

Key ideas:
- Group-level options are initialized once and placed into ``ctx.obj``.
- Subcommands share the console, config resolution and DATE parsing helpers
  from :mod:`chronos.cli.cmd_common`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chronos.cli.commands.ago import ago_command
from chronos.cli.commands.config import config_command
from chronos.cli.commands.diff import diff_command
from chronos.cli.commands.format import format_command
from chronos.cli.commands.inspect import inspect_command
from chronos.cli.commands.shift import shift_command
from chronos.cli.commands.version import version_command
from chronos.cli.console import ClickConsole
from chronos.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from chronos.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from chronos.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal diagnostics are driven by CHRONOS_LOG_LEVEL only.
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    if "console" not in ctx.obj:
        ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Chronos: parse, shift, compare and format dates from the command line.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Chronos CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]
    logger.trace("Invoked subcommand: %s", ctx.invoked_subcommand)

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'chronos format [DATE]' to print a date.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(format_command)

cli.add_command(shift_command)

cli.add_command(diff_command)

cli.add_command(ago_command)

cli.add_command(inspect_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
