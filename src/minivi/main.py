"""Top-level CLI entrypoint dispatcher."""

from __future__ import annotations

import argparse
import io
import logging
import shutil
import sys
from collections.abc import Sequence
from typing import TextIO

from .core import Editor
from .session import Session, read_keys
from .state import DEFAULT_HEIGHT, DEFAULT_TAB_WIDTH, DEFAULT_WIDTH, EditorConfig
from .terminal import AnsiTerminal
from .tui import run_tui

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {value}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minivi", description="Minimal modal text editor.")
    parser.add_argument("path", help="file to edit")
    parser.add_argument("--width", type=_positive_int, help="screen columns (default: terminal width)")
    parser.add_argument("--height", type=_positive_int, help="screen rows (default: terminal height)")
    parser.add_argument(
        "--tab-width",
        type=_positive_int,
        default=DEFAULT_TAB_WIDTH,
        help="spaces inserted by Tab and removed by backspace in indentation",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="read keystrokes from stdin and write escape sequences to stdout",
    )
    parser.add_argument("--log-file", help="write debug logging to this file")
    return parser


def build_config(args: argparse.Namespace) -> EditorConfig:
    size = shutil.get_terminal_size((DEFAULT_WIDTH, DEFAULT_HEIGHT))
    return EditorConfig(
        width=args.width or size.columns,
        height=args.height or size.lines,
        tab_width=args.tab_width,
    )


def configure_logging(log_file: str | None) -> None:
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def keystroke_input() -> TextIO:
    stdin = sys.stdin
    if isinstance(stdin, io.TextIOWrapper):
        # An undecodable byte arrives as one U+FFFD keystroke.
        stdin.reconfigure(errors="replace")
    return stdin


def run_headless(editor: Editor) -> int:
    session = Session(editor, AnsiTerminal(sys.stdout))
    return session.run(read_keys(keystroke_input()))


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file)

    try:
        config = build_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        editor = Editor.open(args.path, config=config)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("cannot open %s: %s", args.path, exc)
        print(f"Error: Couldn't open file: {exc}", file=sys.stderr)
        return 1

    if args.headless or not sys.stdin.isatty():
        return run_headless(editor)
    return run_tui(editor)


def run() -> None:
    raise SystemExit(main())
