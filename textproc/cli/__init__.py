"""
cli — command-line interface for textproc.

Entry points
────────────
  python -m textproc        (via textproc/__main__.py)
  textproc                  (via pyproject.toml [project.scripts])

Subcommands: find | replace | gui
"""

from textproc.cli.main import build_parser, cmd_find, cmd_replace, main

__all__ = ["build_parser", "cmd_find", "cmd_replace", "main"]
