"""Find timestamps in log lines and convert them to unix seconds.

Example:
    >>> from timescan import TimestampFinder
    >>> TimestampFinder().find_timestamp("[23/Nov/2019:06:26:40.781] GET /")
    1574490400
"""

from __future__ import annotations

from timescan.core import (
    DEFAULT_FORMAT,
    FormatCompileError,
    TimestampFinder,
    TimestampMatch,
    compile_format,
    parse_timestamp,
    scan,
    scan_file,
)

__all__ = [
    "DEFAULT_FORMAT",
    "FormatCompileError",
    "TimestampFinder",
    "TimestampMatch",
    "compile_format",
    "parse_timestamp",
    "scan",
    "scan_file",
]
