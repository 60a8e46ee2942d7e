"""Exact parsing of matched timestamp text.

The search pattern is intentionally loose. This module re-walks the template
over the matched text and only accepts strings that follow the template
exactly and describe a real calendar date-time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from .compiler import CompiledFormat, compile_format
from .specifiers import Specifier, SpecifierKind, match_month_name

EPOCH_YEAR = 1970


class _Mismatch(Exception):
    """Internal signal: the text does not follow the template."""


@dataclass(slots=True)
class _Fields:
    year: int | None = None
    century: int | None = None
    year_2d: int | None = None
    month: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    epoch: int | None = None
    fraction: int | None = None

    def set(self, name: str, value: int) -> None:
        current = getattr(self, name)
        if current is not None and current != value:
            raise _Mismatch(f"conflicting values for {name}")
        setattr(self, name, value)

    def resolve_year(self) -> int:
        if self.year is not None:
            if self.century is not None and self.century != self.year // 100:
                raise _Mismatch("year disagrees with century")
            if self.year_2d is not None and self.year_2d != self.year % 100:
                raise _Mismatch("year disagrees with short year")
            return self.year
        if self.century is not None:
            return self.century * 100 + (self.year_2d or 0)
        if self.year_2d is not None:
            # Short year alone covers 1970-2069.
            return self.year_2d + (2000 if self.year_2d < 70 else 1900)
        return EPOCH_YEAR


def _consume(spec: Specifier, text: str, pos: int, fields: _Fields) -> int:
    if spec.kind == SpecifierKind.MONTH_NAME:
        found = match_month_name(text, pos, allow_full=spec.token == "%B")
        if found is None:
            raise _Mismatch(f"month name expected at offset {pos}")
        month, end = found
        fields.set("month", month)
        return end

    m = spec.consume(text, pos)
    if m is None:
        raise _Mismatch(f"{spec.token} expected at offset {pos}")
    raw = m.group(0)

    if spec.kind == SpecifierKind.NUMBER:
        fields.set(spec.target, int(raw))
    elif spec.kind == SpecifierKind.FRACTION:
        fields.set("fraction", int(raw[1:]))
    elif spec.kind == SpecifierKind.EPOCH:
        fields.set("epoch", int(raw))
    return m.end()


def _walk(compiled: CompiledFormat, text: str) -> _Fields:
    fields = _Fields()
    pos = 0
    for tok in compiled.tokens:
        if isinstance(tok, Specifier):
            pos = _consume(tok, text, pos, fields)
        elif text.startswith(tok, pos):
            pos += len(tok)
        else:
            raise _Mismatch(f"literal {tok!r} expected at offset {pos}")

    if pos != len(text):
        raise _Mismatch(f"trailing input at offset {pos}")
    return fields


def parse_timestamp(template: str | CompiledFormat, matched: str) -> int | None:
    """Parse `matched` against `template` and return UTC epoch seconds.

    Returns None when the text does not follow the template exactly or when
    the resulting date-time is not valid. Missing fields default to
    1970-01-01 00:00:00. A ``%s`` field is returned as-is.
    """
    compiled = template if isinstance(template, CompiledFormat) else compile_format(template)
    if not compiled.specifiers:
        return None

    try:
        fields = _walk(compiled, matched)
        if fields.epoch is not None:
            return fields.epoch
        year = fields.resolve_year()
    except _Mismatch:
        return None

    # Leap second: keep second granularity by folding it onto :59.
    second = fields.second if fields.second is not None else 0
    if second == 60:
        second = 59

    try:
        dt = datetime(
            year,
            fields.month if fields.month is not None else 1,
            fields.day if fields.day is not None else 1,
            fields.hour if fields.hour is not None else 0,
            fields.minute if fields.minute is not None else 0,
            second,
            tzinfo=UTC,
        )
    except ValueError:
        return None
    return int(dt.timestamp())
