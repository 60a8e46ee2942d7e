"""Core timestamp finding: specifier table, compiler, parser, finder and scanner."""

from __future__ import annotations

from .compiler import CompiledFormat, FormatCompileError, compile_format, tokenize_format
from .finder import DEFAULT_FORMAT, TimestampFinder
from .lines import aiter_lines, iter_lines
from .models import LineTimestamp, TimestampMatch
from .parser import parse_timestamp
from .scanning import aiter_file_matches, iter_matches, iter_timestamps, scan, scan_file
from .specifiers import MONTH_NAMES, SPECIFIERS, Specifier, SpecifierKind

__all__ = [
    "DEFAULT_FORMAT",
    "MONTH_NAMES",
    "SPECIFIERS",
    "CompiledFormat",
    "FormatCompileError",
    "LineTimestamp",
    "Specifier",
    "SpecifierKind",
    "TimestampFinder",
    "TimestampMatch",
    "aiter_file_matches",
    "aiter_lines",
    "compile_format",
    "iter_lines",
    "iter_matches",
    "iter_timestamps",
    "parse_timestamp",
    "scan",
    "scan_file",
    "tokenize_format",
]
