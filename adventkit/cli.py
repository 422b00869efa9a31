"""Command-line entry point."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence

from adventkit.commands import (
    handle_all,
    handle_download,
    handle_read,
    handle_scaffold,
    handle_solve,
    handle_time,
)
from adventkit.day import Day, DayError

__all__ = ["parse_args", "main"]

_COMMANDS = ("all", "time", "download", "read", "scaffold", "solve", "today")
_U8 = re.compile(r"\+?[0-9]+")


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise ValueError(message)


def _day(text: str) -> Day:
    try:
        return Day.parse(text)
    except DayError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _part(text: str) -> int:
    if not _U8.fullmatch(text) or int(text) > 255:
        raise argparse.ArgumentTypeError(f"invalid part number: {text!r}")
    return int(text)


def _build_parser() -> _Parser:
    parser = _Parser(prog="adventkit")
    commands = parser.add_subparsers(dest="command")

    sub = commands.add_parser("all")
    sub.add_argument("--release", action="store_true")

    sub = commands.add_parser("time")
    sub.add_argument("--all", action="store_true")
    sub.add_argument("--store", action="store_true")
    sub.add_argument("day", nargs="?", type=_day, default=None)

    for name in ("download", "read"):
        sub = commands.add_parser(name)
        sub.add_argument("day", type=_day)

    sub = commands.add_parser("scaffold")
    sub.add_argument("day", type=_day)
    sub.add_argument("--download", action="store_true")
    sub.add_argument("--overwrite", action="store_true")

    sub = commands.add_parser("solve")
    sub.add_argument("day", type=_day)
    sub.add_argument("--release", action="store_true")
    sub.add_argument("--submit", type=_part, default=None)
    sub.add_argument("--dhat", action="store_true")

    commands.add_parser("today")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line; raise ``ValueError`` on malformed arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    first = args[0] if args else None

    if first is None or first.startswith("-"):
        print("No command specified.", file=sys.stderr)
        raise SystemExit(1)
    if first not in _COMMANDS:
        print(f"Unknown command: {first}", file=sys.stderr)
        raise SystemExit(1)

    namespace, remaining = _build_parser().parse_known_args(args)
    if remaining:
        listed = ", ".join(f'"{arg}"' for arg in remaining)
        print(f"Warning: unknown argument(s): [{listed}].", file=sys.stderr)
    return namespace


def main(argv: Sequence[str] | None = None) -> None:
    """Run the subcommand named on the command line."""
    try:
        args = parse_args(argv)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from None

    match args.command:
        case "all":
            handle_all(args.release)
        case "time":
            handle_time(args.day, args.all, args.store)
        case "download":
            handle_download(args.day)
        case "read":
            handle_read(args.day)
        case "scaffold":
            handle_scaffold(args.day, args.overwrite)
            if args.download:
                handle_download(args.day)
        case "solve":
            handle_solve(args.day, args.release, args.dhat, args.submit)
        case "today":
            day = Day.today()
            if day is None:
                print(
                    "`today` command can only be run between the 1st and the 25th "
                    "of december. Please use `scaffold` with a specific day.",
                    file=sys.stderr,
                )
                raise SystemExit(1)
            handle_scaffold(day, False)
            handle_download(day)
            handle_read(day)