"""Handlers behind each subcommand of the command line."""

from __future__ import annotations

import subprocess
import sys

from adventkit import aoc_cli, readme_benchmarks
from adventkit.day import Day, all_days
from adventkit.readme_benchmarks import ReadmeError, get_path_for_bin
from adventkit.run_multi import run_multi
from adventkit.timings import Timings

__all__ = [
    "MODULE_TEMPLATE",
    "handle_all",
    "handle_download",
    "handle_read",
    "handle_scaffold",
    "handle_solve",
    "handle_time",
]

MODULE_TEMPLATE = '''\
from adventkit.day import Day
from adventkit.runner import run_day

DAY = Day(%DAY_NUMBER%)


def part_one(text):
    return None


def part_two(text):
    return None


if __name__ == "__main__":
    run_day(DAY, part_one, part_two)
'''

_NOT_FOUND = (
    'command "aoc" not found or not callable. '
    'Try running "cargo install aoc-cli" to install it.'
)


def _fail(message: str) -> SystemExit:
    print(message, file=sys.stderr)
    return SystemExit(1)


def handle_all(is_release: bool = False) -> None:
    """Run every day's solution."""
    run_multi(all_days(), is_release, False)


def _ensure_client() -> None:
    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        raise _fail(_NOT_FOUND) from None


def handle_download(day: Day) -> None:
    """Download the input and puzzle description for ``day``."""
    _ensure_client()
    try:
        aoc_cli.download(day)
    except aoc_cli.AocCommandError as exc:
        raise _fail(f"failed to call aoc-cli: {exc}") from None


def handle_read(day: Day) -> None:
    """Show the puzzle description for ``day``."""
    _ensure_client()
    try:
        aoc_cli.read(day)
    except aoc_cli.AocCommandError as exc:
        raise _fail(f"failed to call aoc-cli: {exc}") from None


def handle_scaffold(day: Day, overwrite: bool = False) -> None:
    """Create the solution script and empty input and example files for ``day``."""
    input_path = f"data/inputs/{day}.txt"
    example_path = f"data/examples/{day}.txt"
    module_path = get_path_for_bin(day)

    try:
        module_file = open(module_path, "w" if overwrite else "x", encoding="utf-8")
    except OSError as exc:
        raise _fail(f"Failed to create module file: {exc}") from None

    with module_file:
        try:
            module_file.write(MODULE_TEMPLATE.replace("%DAY_NUMBER%", str(day.number)))
        except OSError as exc:
            raise _fail(f"Failed to write module contents: {exc}") from None
    print(f'Created module file "{module_path}"')

    for label, path in (("input", input_path), ("example", example_path)):
        try:
            open(path, "w", encoding="utf-8").close()
        except OSError as exc:
            raise _fail(f"Failed to create {label} file: {exc}") from None
        print(f'Created empty {label} file "{path}"')

    print("---")
    print(f"🎄 Type `adventkit solve {day}` to run your solution.")


def handle_solve(
    day: Day,
    release: bool = False,
    dhat: bool = False,
    submit_part: int | None = None,
) -> subprocess.CompletedProcess:
    """Run the solution script for ``day`` in the foreground."""
    command = [sys.executable]
    if dhat:
        command.extend(["-O", "-X", "tracemalloc"])
    elif release:
        command.append("-O")
    command.append(get_path_for_bin(day))
    if submit_part is not None:
        command.extend(["--submit", str(submit_part)])
    return subprocess.run(command, check=False)


def handle_time(day: Day | None = None, run_all: bool = False, store: bool = False) -> None:
    """Benchmark solutions and optionally store the results and README table."""
    stored = Timings.read_from_file()

    if day is not None:
        days = {day}
    elif run_all:
        days = set(all_days())
    else:
        days = {d for d in all_days() if not stored.is_day_complete(d)}

    timings = run_multi(days, True, True)

    if store:
        merged = stored.merge(timings)
        merged.store_file()
        print()
        try:
            readme_benchmarks.update(merged)
        except (ReadmeError, OSError):
            print("Failed to store updated benchmarks.", file=sys.stderr)
        else:
            print("Stored updated benchmarks.")