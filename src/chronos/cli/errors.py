# topmark:header:start
#
#   project      : Chronos
#   file         : errors.py
#   file_relpath : src/chronos/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Chronos CLI.

Raise these in commands to signal errors with standardized messages and exit
codes. They print through the project console when one is present in the Click
context and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from chronos.cli.exit_codes import ExitCode


class ChronosCliError(click.ClickException):
    """Base class for all Chronos CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class ChronosUsageError(ChronosCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ChronosInvalidDateError(ChronosCliError):
    """A DATE argument does not describe a valid point in time."""

    exit_code = ExitCode.DATA_ERROR


class ChronosConfigFileError(ChronosCliError):
    """Error for configuration errors (unreadable/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
