"""Calls to the external ``aoc`` command-line client."""

from __future__ import annotations

import os
import re
import subprocess
from collections.abc import Sequence

from adventkit.day import Day

__all__ = [
    "AocCommandError",
    "CommandNotFound",
    "CommandNotCallable",
    "BadExitStatus",
    "check",
    "read",
    "download",
    "submit",
    "get_input_path",
    "get_puzzle_path",
    "get_year",
    "build_args",
]

AOC_COMMAND = "aoc"

_YEAR = re.compile(r"\+?[0-9]+")


class AocCommandError(Exception):
    """Base class for failures when calling the ``aoc`` client."""

    message = "aoc-cli failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class CommandNotFound(AocCommandError):
    """The ``aoc`` client is not installed."""

    message = "aoc-cli is not present in environment."


class CommandNotCallable(AocCommandError):
    """The ``aoc`` client could not be started."""

    message = "aoc-cli could not be called."


class BadExitStatus(AocCommandError):
    """The ``aoc`` client exited with a non-zero status."""

    message = "aoc-cli exited with a non-zero status."

    def __init__(self, process: subprocess.CompletedProcess) -> None:
        super().__init__()
        self.process = process


def check() -> None:
    """Make sure the ``aoc`` client can be run."""
    try:
        subprocess.run(
            [AOC_COMMAND, "-V"],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError:
        raise CommandNotFound() from None


def read(day: Day) -> subprocess.CompletedProcess:
    """Show the puzzle description for ``day``."""
    args = build_args(
        "read",
        ["--description-only", "--puzzle-file", get_puzzle_path(day)],
        day,
    )
    return _call_aoc_cli(args)


def download(day: Day) -> subprocess.CompletedProcess:
    """Download the input and puzzle description for ``day``."""
    input_path = get_input_path(day)
    puzzle_path = get_puzzle_path(day)
    args = build_args(
        "download",
        ["--overwrite", "--input-file", input_path, "--puzzle-file", puzzle_path],
        day,
    )
    process = _call_aoc_cli(args)
    print("---")
    print(f'🎄 Successfully wrote input to "{input_path}".')
    print(f'🎄 Successfully wrote puzzle to "{puzzle_path}".')
    return process


def submit(day: Day, part: int, result: str) -> subprocess.CompletedProcess:
    """Submit ``result`` as the answer to ``part`` of ``day``."""
    # The client expects the part and answer after the subcommand.
    args = build_args("submit", [], day)
    args.extend([str(part), str(result)])
    return _call_aoc_cli(args)


def get_input_path(day: Day) -> str:
    return f"data/inputs/{day}.txt"


def get_puzzle_path(day: Day) -> str:
    return f"data/puzzles/{day}.md"


def get_year() -> int | None:
    """The year from ``AOC_YEAR``, if it holds a valid one."""
    value = os.environ.get("AOC_YEAR")
    if value is None or not _YEAR.fullmatch(value):
        return None
    year = int(value)
    return year if year <= 0xFFFF else None


def build_args(command: str, args: Sequence[str], day: Day) -> list[str]:
    """Arguments for an ``aoc`` call: options, optional year, day, then command."""
    cmd_args = list(args)
    year = get_year()
    if year is not None:
        cmd_args.extend(["--year", str(year)])
    cmd_args.extend(["--day", str(day), command])
    return cmd_args


def _call_aoc_cli(args: Sequence[str]) -> subprocess.CompletedProcess:
    try:
        process = subprocess.run([AOC_COMMAND, *args], check=False)
    except OSError:
        raise CommandNotCallable() from None
    if process.returncode != 0:
        raise BadExitStatus(process)
    return process