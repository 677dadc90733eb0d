# topmark:header:start
#
#   project      : Chronos
#   file         : __init__.py
#   file_relpath : src/chronos/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chronos CLI subcommands."""
