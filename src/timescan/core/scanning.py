"""Stream scanning.

Drives a finder over successive lines and collects the timestamps it finds,
in line order. Read and decode errors end the scan early; whatever was
collected up to that point is returned.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from contextlib import aclosing
from pathlib import Path
from typing import TYPE_CHECKING

from .lines import LineSource, aiter_lines, iter_lines
from .models import LineTimestamp

if TYPE_CHECKING:
    from .finder import TimestampFinder


def iter_matches(
    finder: TimestampFinder,
    source: LineSource,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "strict",
) -> Iterator[LineTimestamp]:
    """Yield a LineTimestamp for every line holding a parsable timestamp."""
    for line_no, line in enumerate(
        iter_lines(source, encoding=encoding, decode_errors=decode_errors), start=1
    ):
        m = finder.find_match(line)
        if m is not None:
            yield LineTimestamp(line_no=line_no, match=m)


def iter_timestamps(finder: TimestampFinder, source: LineSource, **kwargs) -> Iterator[int]:
    """Lazily yield epoch seconds, one per matching line."""
    return (hit.match.timestamp for hit in iter_matches(finder, source, **kwargs))


def scan(finder: TimestampFinder, source: LineSource, **kwargs) -> list[int]:
    """Collect iter_timestamps into a list."""
    return list(iter_timestamps(finder, source, **kwargs))


async def aiter_file_matches(
    finder: TimestampFinder,
    path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "strict",
) -> AsyncIterator[LineTimestamp]:
    """Async form of iter_matches over a file (plain or .gz)."""
    line_no = 0
    async with aclosing(aiter_lines(path, encoding=encoding, decode_errors=decode_errors)) as lines:
        async for line in lines:
            line_no += 1
            m = finder.find_match(line)
            if m is not None:
                yield LineTimestamp(line_no=line_no, match=m)


async def scan_file(finder: TimestampFinder, path: str | Path, **kwargs) -> list[int]:
    """Collect the timestamps of a file into a list."""
    return [hit.match.timestamp async for hit in aiter_file_matches(finder, path, **kwargs)]
