# topmark:header:start
#
#   project      : Chronos
#   file         : __init__.py
#   file_relpath : src/chronos/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chronos command line interface (Click)."""
