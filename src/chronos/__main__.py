# topmark:header:start
#
#   project      : Chronos
#   file         : __main__.py
#   file_relpath : src/chronos/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Chronos via ``python -m chronos``.

Delegates to :func:`chronos.cli.main.cli`, the same entry point as the
``chronos`` console script.

Examples:
    Format today's date::

        python -m chronos format --pattern "YYYY/MM/DD"
"""

from __future__ import annotations

from chronos.cli.main import cli

if __name__ == "__main__":
    cli()
