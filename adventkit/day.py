"""Advent day numbers and helpers for iterating over them."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterator

__all__ = ["DayError", "Day", "all_days", "FIRST_DAY", "LAST_DAY"]

FIRST_DAY = 1
LAST_DAY = 25

# The puzzle server publishes puzzles at midnight UTC-5.
SERVER_TIMEZONE = timezone(timedelta(hours=-5))

_DIGITS = re.compile(r"\+?[0-9]+")


class DayError(ValueError):
    """Raised when a value is not a valid day of advent."""

    def __init__(self, message: str = "expecting a day number between 1 and 25") -> None:
        super().__init__(message)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Day:
    """A day of advent, an integer from 1 to 25, shown as two digits."""

    number: int

    def __post_init__(self) -> None:
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise DayError()
        if not FIRST_DAY <= self.number <= LAST_DAY:
            raise DayError()

    @classmethod
    def parse(cls, text: str) -> Day:
        """Parse a day number such as ``"8"`` or ``"08"``."""
        if not isinstance(text, str) or not _DIGITS.fullmatch(text):
            raise DayError()
        return cls(int(text))

    @classmethod
    def today(cls) -> Day | None:
        """Return today's day if it is the 1st to 25th of December, else ``None``."""
        return _advent_day(datetime.now(timezone.utc))

    def __str__(self) -> str:
        return f"{self.number:02d}"

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    def __int__(self) -> int:
        return self.number

    def __index__(self) -> int:
        return self.number

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Day):
            return self.number == other.number
        if isinstance(other, int) and not isinstance(other, bool):
            return self.number == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Day):
            return self.number < other.number
        if isinstance(other, int) and not isinstance(other, bool):
            return self.number < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.number)


def _advent_day(moment: datetime) -> Day | None:
    local = moment.astimezone(SERVER_TIMEZONE)
    if local.month == 12 and local.day <= LAST_DAY:
        return Day(local.day)
    return None


def all_days() -> Iterator[Day]:
    """Yield every day of advent from the 1st to the 25th."""
    for number in range(FIRST_DAY, LAST_DAY + 1):
        yield Day(number)