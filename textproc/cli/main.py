"""
CLI entry point for textproc.

Usage
─────
  # List every match, one per line
  textproc find "\\d+" --text "a12b345"

  # Replace every match (group references use re syntax: \\1, \\g<name>)
  textproc replace "(\\w+)@(\\w+)" "\\2 at \\1" --file notes.txt

  # Read the subject from stdin
  cat notes.txt | textproc find "TODO.*"

  # Open the desktop window
  textproc gui

Subcommands are implemented as standalone functions (cmd_find, cmd_replace,
cmd_gui) so they can be unit-tested without invoking argparse.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from textproc.config import AppConfig
from textproc.exceptions import ConfigError, PatternError
from textproc.regex.matcher import find_matches, replace_all

__all__ = ["build_parser", "cmd_find", "cmd_replace", "cmd_gui", "main"]

logger = logging.getLogger(__name__)


# ── Argument parser ────────────────────────────────────────────────────────────


def _add_subject_args(parser: argparse.ArgumentParser) -> None:
    src = parser.add_mutually_exclusive_group()
    src.add_argument(
        "--text",
        default=None,
        metavar="TEXT",
        help="Subject text (default: read stdin)",
    )
    src.add_argument(
        "--file",
        default=None,
        metavar="PATH",
        help="Read the subject text from PATH (UTF-8)",
    )


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: find | replace | gui
    """
    parser = argparse.ArgumentParser(
        prog="textproc",
        description="Regex search/replace and key-value record editing",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── find ──────────────────────────────────────────────────────────────
    fnd = sub.add_parser("find", help="Print every match of PATTERN")
    fnd.add_argument("pattern", metavar="PATTERN", help="Regular expression (Python re syntax)")
    _add_subject_args(fnd)

    # ── replace ───────────────────────────────────────────────────────────
    rep = sub.add_parser("replace", help="Replace every match of PATTERN")
    rep.add_argument("pattern", metavar="PATTERN", help="Regular expression (Python re syntax)")
    rep.add_argument(
        "replacement",
        metavar="REPLACEMENT",
        help="Replacement text; may be empty and may use \\1 / \\g<name>",
    )
    _add_subject_args(rep)

    # ── gui ───────────────────────────────────────────────────────────────
    sub.add_parser("gui", help="Open the desktop window")

    return parser


# ── Helpers ───────────────────────────────────────────────────────────────────


def _read_subject(text: Optional[str], file: Optional[str], stdin: TextIO) -> str:
    """Return the subject from --text, --file or *stdin*, in that order."""
    if text is not None:
        return text
    if file is not None:
        return Path(file).read_text(encoding="utf-8")
    return stdin.read()


# ── Command implementations ───────────────────────────────────────────────────


def cmd_find(pattern: str, subject: str) -> list[str]:
    """Print every match of *pattern* in *subject*, one per line, and return them."""
    matches = find_matches(pattern, subject)
    logger.debug("%d match(es) for %r", len(matches), pattern)
    for match in matches:
        print(match)
    return matches


def cmd_replace(pattern: str, replacement: str, subject: str) -> str:
    """Print *subject* with every match replaced, and return it."""
    result = replace_all(pattern, replacement, subject)
    sys.stdout.write(result)
    if result and not result.endswith("\n"):
        sys.stdout.write("\n")
    return result


def cmd_gui(config: AppConfig) -> int:
    """Launch the PyQt6 window; returns the Qt event-loop exit code."""
    from textproc.gui.main_window import run
    return run(config)


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    try:
        config = AppConfig.from_env()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    level = logging.DEBUG if ns.debug else config.logging_level
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    if ns.subcommand is None:
        parser.print_help()
        return 0

    if ns.subcommand == "gui":
        return cmd_gui(config)

    try:
        subject = _read_subject(ns.text, ns.file, sys.stdin)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("could not read subject", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        if ns.subcommand == "find":
            cmd_find(ns.pattern, subject)
        else:
            cmd_replace(ns.pattern, ns.replacement, subject)
    except PatternError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
