"""Running several solution scripts and collecting their timings."""

from __future__ import annotations

import os
import subprocess
import sys
import threading
from collections.abc import Iterable, Sequence
from pathlib import Path

from adventkit.day import Day, all_days
from adventkit.readme_benchmarks import get_path_for_bin
from adventkit.timings import Timing, Timings

__all__ = [
    "ANSI_ITALIC",
    "ANSI_BOLD",
    "ANSI_RESET",
    "run_multi",
    "run_solution",
    "parse_exec_time",
    "parse_time",
]

ANSI_ITALIC = "\x1b[3m"
ANSI_BOLD = "\x1b[1m"
ANSI_RESET = "\x1b[0m"

_SAMPLES_SUFFIX = " samples)"


def run_multi(days_to_run: Iterable[Day], is_release: bool, is_timed: bool) -> Timings | None:
    """Run the solutions for the given days in order; return timings if timed."""
    wanted = set(days_to_run)
    timings: list[Timing] = []

    for index, day in enumerate(day for day in all_days() if day in wanted):
        if index:
            print()
        print(f"{ANSI_BOLD}Day {day}{ANSI_RESET}")
        print("------")

        output = run_solution(day, is_timed, is_release)
        if not output:
            print("Not solved.")
        else:
            timings.append(parse_exec_time(output, day))

    if not is_timed:
        return None

    result = Timings(data=timings)
    print(
        f"\n{ANSI_BOLD}Total (Run):{ANSI_RESET} "
        f"{ANSI_ITALIC}{result.total_millis():.2f}ms{ANSI_RESET}"
    )
    return result


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _forward_stderr(stream) -> None:
    for line in stream:
        print(_strip_newline(line), file=sys.stderr)


def run_solution(day: Day, is_timed: bool, is_release: bool) -> list[str]:
    """Run the solution script for ``day``, echoing and returning its stdout lines."""
    script = get_path_for_bin(day)
    if not Path(script).exists():
        return []

    command = [sys.executable]
    if is_release:
        command.append("-O")
    command.append(script)
    if is_timed:
        command.append("--time")

    env = {**os.environ, "PYTHONIOENCODING": "utf-8"}
    output: list[str] = []

    with subprocess.Popen(
        command,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
        env=env,
    ) as process:
        forwarder = threading.Thread(target=_forward_stderr, args=(process.stderr,))
        forwarder.start()
        for raw in process.stdout:
            line = _strip_newline(raw)
            print(line)
            output.append(line)
        forwarder.join()
        process.wait()

    return output


def parse_exec_time(output: Sequence[str], day: Day) -> Timing:
    """Collect the part timings printed by a solution run."""
    timing = Timing(day=day, part_1=None, part_2=None, total_nanos=0.0)

    for line in output:
        if _SAMPLES_SUFFIX not in line:
            continue
        parsed = parse_time(line)
        if parsed is None:
            print(f"Could not parse timings from line: {line}", file=sys.stderr)
            continue
        timing_str, nanos = parsed
        part = line.split(":", 1)[0]
        if "Part 1" in part:
            timing.part_1 = timing_str
        elif "Part 2" in part:
            timing.part_2 = timing_str
        timing.total_nanos += nanos

    return timing


def _parse_float(text: str) -> float | None:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_time(line: str) -> tuple[str, float] | None:
    """Extract the duration text and its value in nanoseconds from a result line."""
    timing_str = line.split(_SAMPLES_SUFFIX)[0].split("(")[-1].split("@")[0].strip()

    if "ns" in timing_str:
        value = _parse_float(timing_str.split("ns")[0])
        factor = 1.0
    elif "µs" in timing_str:
        value = _parse_float(timing_str.split("µs")[0])
        factor = 1_000.0
    elif "ms" in timing_str:
        value = _parse_float(timing_str.split("ms")[0])
        factor = 1_000_000.0
    else:
        value = _parse_float(timing_str.split("s")[0])
        factor = 1_000_000_000.0

    if value is None:
        return None
    return timing_str, value * factor