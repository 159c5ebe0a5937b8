"""Command-line front door for dirlist.

Parses options, validates and resolves the target directory, and measures
the terminal. Then builds one snapshot and renders it to stdout.
"""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
from pathlib import Path

from . import config
from .errors import DirlistError, InvalidInputError, OutputError
from .formatting import TIME_FIELDS
from .listing_model import DirectorySnapshot
from .render import render
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_terminal_width() -> int:
    """Resolve output width from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def _color_disabled(requested: bool) -> bool:
    if requested or os.environ.get("NO_COLOR"):
        return True
    isatty = getattr(sys.stdout, "isatty", None)
    return not (isatty is not None and isatty())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirlist",
        description="List the contents of a directory as a column grid or detailed rows.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument(
        "-a",
        "--all",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Display all entries including hidden ones (--no-all overrides a saved default).",
    )
    parser.add_argument(
        "-l",
        "--list",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Display one detailed row per entry (--no-list overrides a saved default).",
    )
    parser.add_argument(
        "--time",
        choices=TIME_FIELDS,
        default=None,
        help="Timestamp column for detailed rows (default: modified).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help="Column budget for grid output (default: terminal width).",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging on stderr.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the given -a/-l/--time/--theme options as defaults.",
    )
    return parser


def resolve_directory(path: Path) -> Path:
    """Return the canonical absolute form of ``path``.

    Raises ``InvalidInputError`` when ``path`` is missing or not a directory.
    """
    if not path.exists():
        raise InvalidInputError(path, "Path not found")
    if not path.is_dir():
        raise InvalidInputError(path, "The given argument is a file and not a directory")
    try:
        return path.resolve(strict=True)
    except OSError as exc:
        raise InvalidInputError(path, f"Cannot resolve path ({exc.strerror or exc})") from exc


def _save_defaults(args: argparse.Namespace) -> None:
    config.save_show_hidden(bool(args.all))
    config.save_detailed(bool(args.list))
    if args.time is not None:
        config.save_time_field(args.time)
    if args.theme is not None:
        config.save_theme_name(args.theme)


def run(args: argparse.Namespace, default_path: Path) -> None:
    """List the requested directory to stdout."""
    show_hidden = args.all if args.all is not None else config.load_show_hidden()
    detailed = args.list if args.list is not None else config.load_detailed()
    time_field = args.time or config.load_time_field()
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=_color_disabled(args.no_color))
    width = args.width if args.width is not None else _default_terminal_width()

    directory = resolve_directory(Path(args.path) if args.path is not None else default_path)
    snapshot = DirectorySnapshot.build(directory, show_hidden, detailed)
    render(snapshot, sys.stdout, width, show_hidden, detailed, theme=theme, time_field=time_field)


def _redirect_stdout_to_devnull() -> None:
    """Point the stdout descriptor at devnull so the final flush cannot fail on a closed pipe."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    finally:
        os.close(devnull)


def main(argv: list[str] | None = None, default_path: Path | None = None) -> int:
    """Parse CLI arguments and list a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Listing failures exit through ``SystemExit`` with the
    error message on stderr.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )

    if args.save_defaults:
        _save_defaults(args)

    try:
        run(args, default_path if default_path is not None else Path.cwd())
    except OutputError as exc:
        logger.debug("Output aborted: %s", exc)
        if isinstance(exc.cause, BrokenPipeError):
            try:
                _redirect_stdout_to_devnull()
            except (OSError, ValueError):
                pass
            raise SystemExit(1) from exc
        raise SystemExit(str(exc)) from exc
    except DirlistError as exc:
        logger.debug("Listing failed: %s", exc)
        raise SystemExit(str(exc)) from exc
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
