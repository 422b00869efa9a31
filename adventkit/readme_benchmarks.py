"""Keeping the benchmark table in the README up to date."""

from __future__ import annotations

import re
from pathlib import Path
from typing import NamedTuple

from adventkit.day import Day
from adventkit.timings import Timings

__all__ = [
    "MARKER",
    "README_PATH",
    "ReadmeError",
    "TablePosition",
    "get_path_for_bin",
    "locate_table",
    "construct_table",
    "update_content",
    "update",
]

MARKER = "<!--- benchmarking table --->"
README_PATH = "README.md"

_MARKER_PATTERN = re.compile(re.escape(MARKER))


class ReadmeError(ValueError):
    """Raised when the benchmark table cannot be located in the README."""


class TablePosition(NamedTuple):
    """Character span of the benchmark table, markers included."""

    start: int
    end: int


def get_path_for_bin(day: Day) -> str:
    """Path of the solution script for ``day``."""
    return f"./src/bin/{day}.py"


def locate_table(readme: str) -> TablePosition:
    """Find the span between the first and the last table marker."""
    matches = list(_MARKER_PATTERN.finditer(readme))
    if len(matches) > 2:
        raise ReadmeError("too many occurrences of marker in README.")
    if not matches:
        raise ReadmeError("Could not find table start position.")
    return TablePosition(start=matches[0].start(), end=matches[-1].end())


def construct_table(prefix: str, timings: Timings, total_millis: float) -> str:
    """Render the benchmark table, wrapped in markers."""
    lines = [
        MARKER,
        f"{prefix} Benchmarks",
        "",
        "| Day | Part 1 | Part 2 |",
        "| :---: | :---: | :---:  |",
    ]
    for timing in timings.data:
        part_1 = timing.part_1 if timing.part_1 is not None else "-"
        part_2 = timing.part_2 if timing.part_2 is not None else "-"
        lines.append(
            f"| [Day {timing.day.number}]({get_path_for_bin(timing.day)}) "
            f"| `{part_1}` | `{part_2}` |"
        )
    lines.append("")
    lines.append(f"**Total: {total_millis:.2f}ms**")
    lines.append(MARKER)
    return "\n".join(lines)


def update_content(text: str, timings: Timings, total_millis: float) -> str:
    """Return ``text`` with its benchmark table replaced by a fresh one."""
    position = locate_table(text)
    table = construct_table("##", timings, total_millis)
    return text[: position.start] + table + text[position.end :]


def update(timings: Timings, path: str | Path = README_PATH) -> None:
    """Rewrite the benchmark table of the README at ``path``."""
    readme_path = Path(path)
    readme = readme_path.read_bytes().decode("utf-8", errors="replace")
    readme = update_content(readme, timings, timings.total_millis())
    readme_path.write_text(readme, encoding="utf-8")