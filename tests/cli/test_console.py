# topmark:header:start
#
#   project      : Chronos
#   file         : test_console.py
#   file_relpath : tests/cli/test_console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ClickConsole stream routing and styling."""

from __future__ import annotations

import io

import pytest

from chronos.cli.console import ClickConsole, ConsoleLike

pytestmark = pytest.mark.cli


def _console(*, enable_color: bool) -> tuple[ClickConsole, io.StringIO, io.StringIO]:
    out, err = io.StringIO(), io.StringIO()
    return ClickConsole(enable_color=enable_color, out=out, err=err), out, err


def test_print_and_error_use_separate_streams() -> None:
    """Dates go to the output stream, errors to the error stream."""
    console, out, err = _console(enable_color=False)
    console.print("2024-06-15")
    console.print("no newline", nl=False)
    console.error("Error: bad date")
    assert out.getvalue() == "2024-06-15\nno newline"
    assert err.getvalue() == "Error: bad date\n"


def test_styled_is_plain_without_color() -> None:
    """Styling is a no-op when color is disabled."""
    console, _, _ = _console(enable_color=False)
    assert console.styled("week", fg="cyan", bold=True) == "week"


def test_styled_adds_ansi_with_color() -> None:
    """With color enabled, styled text carries ANSI codes that are kept on output."""
    console, out, _ = _console(enable_color=True)
    text = console.styled("week", fg="cyan")
    assert text != "week"
    assert "\x1b[" in text and "week" in text
    console.print(text)
    assert "\x1b[" in out.getvalue()


def test_click_console_satisfies_protocol() -> None:
    """The concrete console can stand wherever a ConsoleLike is expected."""
    console: ConsoleLike = ClickConsole(enable_color=False)
    assert callable(console.print) and callable(console.error) and callable(console.styled)
