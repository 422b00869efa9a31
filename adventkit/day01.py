"""Day 1: following parentheses up and down the floors."""

from __future__ import annotations

from collections.abc import Sequence

from adventkit.day import Day
from adventkit.runner import run_day

__all__ = ["DAY", "part_one", "part_two", "main"]

DAY = Day(1)


def part_one(text: str) -> int:
    """The floor reached after following every instruction."""
    return text.count("(") - text.count(")")


def part_two(text: str) -> int | None:
    """The 1-based position of the first instruction that enters the basement."""
    floor = 0
    for position, char in enumerate(text, start=1):
        if char == "(":
            floor += 1
        elif char == ")":
            floor -= 1
        if floor == -1:
            return position
    return None


def main(argv: Sequence[str] | None = None) -> None:
    """Solve day 1 on ``data/inputs/01.txt``."""
    run_day(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()