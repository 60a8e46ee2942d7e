"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from contextlib import aclosing
from typing import Any

from pydantic import BaseModel, Field

from timescan.config import default_format, safe_resolve
from timescan.core import LineTimestamp, TimestampFinder, aiter_file_matches

DEFAULT_LIMIT = 1000
HARD_LIMIT = 100_000


class TimestampLookup(BaseModel):
    found: bool
    timestamp: int | None = Field(default=None, description="Unix seconds (UTC).")
    match: str | None = Field(default=None, description="Matched substring.")
    span: tuple[int, int] | None = Field(default=None, description="Character offsets of the match.")


class ScanHit(BaseModel):
    line_no: int
    timestamp: int
    match: str


class ScanResult(BaseModel):
    count: int
    timestamps: list[int] = Field(default_factory=list)
    first: int | None = None
    last: int | None = None
    truncated: bool = Field(default=False, description="True when the limit cut the result short.")
    hits: list[ScanHit] | None = None


def _finder(datetime_format: str | None) -> TimestampFinder:
    """Build a finder for the requested (or configured default) template."""
    return TimestampFinder(datetime_format if datetime_format else default_format())


def _resolve_limit(limit: int | None) -> int:
    if limit is None:
        return DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    return min(limit, HARD_LIMIT)


def find_timestamp_impl(*, text: str, datetime_format: str | None = None) -> dict[str, Any]:
    """Implementation for the `find_timestamp` MCP tool."""
    m = _finder(datetime_format).find_match(text)
    if m is None:
        return TimestampLookup(found=False).model_dump()
    return TimestampLookup(found=True, timestamp=m.timestamp, match=m.text, span=m.span).model_dump()


async def scan_log_impl(
    *,
    log_path: str,
    datetime_format: str | None = None,
    limit: int | None = None,
    include_lines: bool = False,
) -> dict[str, Any]:
    """Implementation for the `scan_log` MCP tool.

    Notes
    -----
    - log_path is resolved under TIMESCAN_BASE_DIR.
    - Results are capped at `limit` (default DEFAULT_LIMIT, at most HARD_LIMIT).
    - include_lines adds per-line hits with their 1-based line numbers.
    """
    finder = _finder(datetime_format)
    cap = _resolve_limit(limit)
    path = safe_resolve(log_path)

    hits: list[LineTimestamp] = []
    truncated = False
    async with aclosing(aiter_file_matches(finder, path)) as matches:
        async for hit in matches:
            if len(hits) >= cap:
                truncated = True
                break
            hits.append(hit)

    timestamps = [h.match.timestamp for h in hits]
    result = ScanResult(
        count=len(timestamps),
        timestamps=timestamps,
        first=timestamps[0] if timestamps else None,
        last=timestamps[-1] if timestamps else None,
        truncated=truncated,
        hits=(
            [ScanHit(line_no=h.line_no, timestamp=h.match.timestamp, match=h.match.text) for h in hits]
            if include_lines
            else None
        ),
    )
    return result.model_dump(exclude_none=True)
