"""Core data models for timestamp lookups."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass(frozen=True, slots=True)
class TimestampMatch:
    """A located timestamp (matched text + span in the searched string + epoch seconds)."""

    text: str
    span: tuple[int, int]
    timestamp: int

    def as_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=UTC)


@dataclass(frozen=True, slots=True)
class LineTimestamp:
    """Scanner hit: 1-based line number and the match found on it."""

    line_no: int
    match: TimestampMatch
