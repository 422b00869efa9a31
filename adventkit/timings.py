"""Benchmark timings per day, stored as JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from adventkit.day import Day, DayError

__all__ = ["TIMINGS_FILE_PATH", "TimingsError", "Timing", "Timings"]

TIMINGS_FILE_PATH = "./data/timings.json"


class TimingsError(ValueError):
    """Raised when timings cannot be read from JSON."""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _optional_part(json_obj: dict, key: str) -> str | None:
    if key not in json_obj:
        raise TimingsError(f"Expected timing.{key} to be null or string.")
    value = json_obj[key]
    return value if isinstance(value, str) else None


@dataclass
class Timing:
    """Benchmark times for a single day."""

    day: Day
    part_1: str | None = None
    part_2: str | None = None
    total_nanos: float = 0.0

    def to_json(self) -> dict:
        """Return a JSON-ready mapping of this timing."""
        return {
            "day": str(self.day),
            "total_nanos": float(self.total_nanos),
            "part_1": self.part_1,
            "part_2": self.part_2,
        }

    @classmethod
    def from_json(cls, value: Any) -> Timing:
        """Build a timing from a decoded JSON object."""
        if not isinstance(value, dict):
            raise TimingsError("Expected timing to be a JSON object.")

        try:
            day = Day.parse(value.get("day"))
        except DayError:
            raise TimingsError("Expected timing.day to be a Day struct.") from None

        part_1 = _optional_part(value, "part_1")
        part_2 = _optional_part(value, "part_2")

        total_nanos = value.get("total_nanos")
        if not _is_number(total_nanos):
            raise TimingsError("Expected timing.total_nanos to be a number.")

        return cls(day=day, part_1=part_1, part_2=part_2, total_nanos=float(total_nanos))


@dataclass
class Timings:
    """Benchmark times for a set of days."""

    data: list[Timing] = field(default_factory=list)

    def to_json(self) -> dict:
        """Return a JSON-ready mapping of all timings."""
        return {"data": [timing.to_json() for timing in self.data]}

    @classmethod
    def from_json_text(cls, text: str) -> Timings:
        """Parse timings from a JSON document."""
        try:
            document = json.loads(text)
        except ValueError:
            raise TimingsError("not valid JSON file.") from None
        if not isinstance(document, dict):
            raise TimingsError("expected JSON document to be an object.")
        if "data" not in document:
            raise TimingsError("expected JSON document to have key `data`.")
        data = document["data"]
        if not isinstance(data, list):
            raise TimingsError("expected `json.data` to be an array.")
        return cls(data=[Timing.from_json(item) for item in data])

    def store_file(self, path: str | Path = TIMINGS_FILE_PATH) -> None:
        """Write the timings to a JSON file."""
        Path(path).write_text(json.dumps(self.to_json(), indent=2), encoding="utf-8")

    @classmethod
    def read_from_file(cls, path: str | Path = TIMINGS_FILE_PATH) -> Timings:
        """Read timings from a JSON file, or return empty timings if unavailable."""
        try:
            text = Path(path).read_text(encoding="utf-8")
            return cls.from_json_text(text)
        except (OSError, UnicodeDecodeError, TimingsError):
            return cls()

    def merge(self, new: Timings) -> Timings:
        """Combine with ``new``, preferring its entries, sorted by day."""
        data = list(new.data)
        seen = {timing.day for timing in data}
        data.extend(timing for timing in self.data if timing.day not in seen)
        data.sort(key=lambda timing: timing.day)
        return Timings(data=data)

    def total_millis(self) -> float:
        """Total duration of all timings in milliseconds."""
        return sum(timing.total_nanos for timing in self.data) / 1_000_000

    def is_day_complete(self, day: Day) -> bool:
        """Whether both parts of ``day`` have been timed."""
        return any(
            t.day == day and t.part_1 is not None and t.part_2 is not None
            for t in self.data
        )