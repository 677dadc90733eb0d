# topmark:header:start
#
#   project      : Chronos
#   file         : config.py
#   file_relpath : src/chronos/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chronos `config` command: dump the effective configuration as TOML."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chronos.cli.cmd_common import get_console, get_effective_verbosity, resolve_config
from chronos.cli.options import common_config_options
from chronos.config.io import to_toml

if TYPE_CHECKING:
    from pathlib import Path


@click.command(
    name="config",
    help="Print the effective configuration (defaults + config files + overrides) as TOML.",
)
@common_config_options
def config_command(
    *,
    config_files: tuple[Path, ...],
    no_config: bool,
    utc: bool | None,
) -> None:
    """Dump the effective configuration."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    config = resolve_config(config_files=config_files, no_config=no_config, utc=utc)

    if get_effective_verbosity(ctx) > 0:
        for source in config.config_files:
            console.print(console.styled(f"# source: {source}", dim=True))
    console.print(to_toml(config.to_toml_dict()), nl=False)
