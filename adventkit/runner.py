"""Running and timing the parts of a single day's solution."""

from __future__ import annotations

import re
import subprocess
import sys
import tracemalloc
from collections.abc import Callable, Sequence
from time import perf_counter_ns
from typing import Any, TypeVar

from adventkit import aoc_cli
from adventkit.day import Day
from adventkit.files import read_file
from adventkit.run_multi import ANSI_BOLD, ANSI_ITALIC, ANSI_RESET

__all__ = [
    "run_day",
    "run_part",
    "run_timed",
    "bench",
    "format_duration",
    "print_result",
    "submit_result",
]

T = TypeVar("T")

_NOT_FOUND = (
    'command "aoc" not found or not callable. '
    'Try running "cargo install aoc-cli" to install it.'
)
_USAGE = "Unexpected command-line input. Format: adventkit solve 1 --submit 1"

_UNITS = (
    (1_000_000_000, "s"),
    (1_000_000, "ms"),
    (1_000, "µs"),
    (1, "ns"),
)

_U8 = re.compile(r"\+?[0-9]+")


def _arguments(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def run_day(
    day: Day,
    part_one: Callable[[str], Any] | None = None,
    part_two: Callable[[str], Any] | None = None,
    argv: Sequence[str] | None = None,
) -> None:
    """Read the day's input and run each given part on it."""
    text = read_file("inputs", day)
    for part, func in ((1, part_one), (2, part_two)):
        if func is not None:
            run_part(func, text, day, part, argv)


def run_part(
    func: Callable[[Any], Any],
    input: Any,
    day: Day,
    part: int,
    argv: Sequence[str] | None = None,
) -> None:
    """Run one part, print its result and timing, and submit it if asked to."""
    args = _arguments(argv)
    part_str = f"Part {part}"

    result, nanos, samples = run_timed(
        func,
        input,
        lambda value: print_result(value, part_str, ""),
        "--time" in args,
    )
    print_result(result, part_str, format_duration(nanos, samples))

    if result is not None:
        try:
            submit_result(result, day, part, args)
        except aoc_cli.AocCommandError as exc:
            print(f"failed to call aoc-cli: {exc}", file=sys.stderr)


def run_timed(
    func: Callable[[Any], T],
    input: Any,
    hook: Callable[[T], None],
    timed: bool = False,
) -> tuple[T, int, int]:
    """Run ``func`` once, then bench it if ``timed``; return result, nanoseconds, samples."""
    profiling = tracemalloc.is_tracing()
    if profiling:
        tracemalloc.reset_peak()

    start = perf_counter_ns()
    result = func(input)
    base_nanos = perf_counter_ns() - start

    if profiling:
        current, peak = tracemalloc.get_traced_memory()
        print(f"heap: peak {peak} bytes, current {current} bytes", file=sys.stderr)

    hook(result)

    if timed:
        nanos, samples = bench(func, input, base_nanos)
    else:
        nanos, samples = base_nanos, 1
    return result, nanos, samples


def bench(func: Callable[[Any], Any], input: Any, base_nanos: int) -> tuple[int, int]:
    """Run ``func`` repeatedly for about a second; return mean nanoseconds and sample count."""
    print(f" > {ANSI_ITALIC}benching{ANSI_RESET}", end="", flush=True)

    iterations = 1_000_000_000 // max(int(base_nanos), 10)
    iterations = min(max(iterations, 10), 10_000)

    durations = []
    for _ in range(iterations):
        start = perf_counter_ns()
        func(input)
        durations.append(perf_counter_ns() - start)

    return sum(durations) // len(durations), iterations


def _format_nanos(nanos: int) -> str:
    nanos = max(int(nanos), 0)
    for size, suffix in _UNITS:
        if nanos >= size or size == 1:
            tenths, rest = divmod(nanos * 10, size)
            if rest and rest * 2 >= size:
                tenths += 1
            return f"{tenths // 10}.{tenths % 10}{suffix}"
    raise AssertionError("unreachable")


def format_duration(nanos: int, samples: int) -> str:
    """Render a duration with one decimal, plus the sample count when benched."""
    text = _format_nanos(nanos)
    if samples == 1:
        return f" ({text})"
    return f" ({text} @ {samples} samples)"


def print_result(result: Any, part: str, duration_str: str) -> None:
    """Print a part's result; an empty ``duration_str`` marks a provisional line."""
    intermediate = not duration_str

    if result is None:
        if intermediate:
            print(f"{part}: ✖", end="", flush=True)
        else:
            print(f"\r{part}: ✖             ")
        return

    text = str(result)
    if "\n" in text:
        line = f"{part}: ▼ {duration_str}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print(f"\r{line}")
            print(text)
    else:
        line = f"{part}: {ANSI_BOLD}{text}{ANSI_RESET}{duration_str}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print(f"\r{line}")


def _usage_error() -> SystemExit:
    print(_USAGE, file=sys.stderr)
    return SystemExit(1)


def submit_result(
    result: Any,
    day: Day,
    part: int,
    argv: Sequence[str] | None = None,
) -> subprocess.CompletedProcess | None:
    """Submit ``result`` if ``--submit <part>`` names this part."""
    args = _arguments(argv)
    if "--submit" not in args:
        return None
    if len(args) < 2:
        raise _usage_error()

    index = args.index("--submit") + 1
    if index >= len(args) or not _U8.fullmatch(args[index]):
        raise _usage_error()
    part_submit = int(args[index])
    if part_submit > 255:
        raise _usage_error()

    if part_submit != part:
        return None

    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        print(_NOT_FOUND, file=sys.stderr)
        raise SystemExit(1) from None

    print("Submitting result via aoc-cli...")
    return aoc_cli.submit(day, part, str(result))