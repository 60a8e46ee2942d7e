"""Timestamp finder facade."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from . import scanning
from .compiler import CompiledFormat, compile_format
from .lines import LineSource
from .models import TimestampMatch
from .parser import parse_timestamp

# Common Log Format style, e.g. "23/Nov/2019:06:26:40.781". Offsets are ignored.
DEFAULT_FORMAT = "%d/%b/%Y:%H:%M:%S%.f"


@dataclass(frozen=True, slots=True)
class TimestampFinder:
    """Find timestamps in text using a strftime-like format.

    The format is compiled once at construction; a FormatCompileError is
    raised if it does not produce a valid search pattern. Instances are
    immutable and can be shared between threads.

    Supported specifiers: %Y %C %y %m %b %h %B %d %H %M %S %.f %s and %%.
    Any other text, including unknown % sequences, matches literally.
    """

    datetime_format: str = DEFAULT_FORMAT
    compiled: CompiledFormat = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "compiled", compile_format(self.datetime_format))

    def find_match(self, text: str) -> TimestampMatch | None:
        """Locate the leftmost candidate in `text` and parse it."""
        found = self.compiled.search(text)
        if found is None:
            return None
        matched, span = found
        ts = parse_timestamp(self.compiled, matched)
        if ts is None:
            return None
        return TimestampMatch(text=matched, span=span, timestamp=ts)

    def find_timestamp(self, text: str) -> int | None:
        """Return the first timestamp in `text` as unix seconds, if any."""
        m = self.find_match(text)
        return m.timestamp if m is not None else None

    def iter_timestamps(self, source: LineSource, **kwargs) -> Iterator[int]:
        return scanning.iter_timestamps(self, source, **kwargs)

    def scan(self, source: LineSource, **kwargs) -> list[int]:
        """Scan a stream line by line and return every timestamp found, in order."""
        return scanning.scan(self, source, **kwargs)

    async def scan_file(self, path: str | Path, **kwargs) -> list[int]:
        """Async scan of a log file on disk (plain text or .gz)."""
        return await scanning.scan_file(self, path, **kwargs)
