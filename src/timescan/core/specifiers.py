"""Format specifier table.

Each specifier pairs a search fragment (used to locate candidates) with a parse
rule (used to turn the consumed text into a calendar field).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


class SpecifierKind(str, Enum):
    """How a specifier's consumed text is interpreted."""

    NUMBER = "number"
    MONTH_NAME = "month_name"
    FRACTION = "fraction"
    EPOCH = "epoch"
    LITERAL = "literal"


@dataclass(frozen=True, slots=True)
class Specifier:
    """One format token with its search fragment and parse rule."""

    token: str
    fragment: str
    kind: SpecifierKind
    target: str | None = None
    description: str = ""
    _anchored: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_anchored", re.compile(self.fragment))

    def consume(self, text: str, pos: int) -> re.Match[str] | None:
        """Greedily match this specifier's fragment at `pos`."""
        return self._anchored.match(text, pos)


SPECIFIERS: tuple[Specifier, ...] = (
    Specifier("%.f", r"\.[0-9]+", SpecifierKind.FRACTION, "fraction", "Dot plus fractional seconds (discarded)."),
    Specifier("%Y", r"[0-9]{1,4}", SpecifierKind.NUMBER, "year", "Full year."),
    Specifier("%C", r"[0-9]{1,2}", SpecifierKind.NUMBER, "century", "Year divided by 100."),
    Specifier("%y", r"[0-9]{1,2}", SpecifierKind.NUMBER, "year_2d", "Year modulo 100."),
    Specifier("%m", r"[0-9]{1,2}", SpecifierKind.NUMBER, "month", "Month number (1-12)."),
    Specifier("%b", r"[A-Za-z]{3}", SpecifierKind.MONTH_NAME, "month", "Abbreviated month name."),
    Specifier("%h", r"[A-Za-z]{3}", SpecifierKind.MONTH_NAME, "month", "Same as %b."),
    Specifier("%B", r"[A-Za-z]{3,}", SpecifierKind.MONTH_NAME, "month", "Full month name (abbreviation accepted)."),
    Specifier("%d", r"[0-9]{1,2}", SpecifierKind.NUMBER, "day", "Day of month."),
    Specifier("%H", r"[0-9]{1,2}", SpecifierKind.NUMBER, "hour", "Hour (0-23)."),
    Specifier("%M", r"[0-9]{1,2}", SpecifierKind.NUMBER, "minute", "Minute (0-59)."),
    Specifier("%S", r"[0-9]{1,2}", SpecifierKind.NUMBER, "second", "Second (0-60)."),
    Specifier("%s", r"[0-9]{1,10}", SpecifierKind.EPOCH, "epoch", "Unix timestamp in seconds."),
    Specifier("%%", "%", SpecifierKind.LITERAL, None, "A literal percent sign."),
)

# Longest token first so a shorter token never shadows a longer one.
SPECIFIERS_BY_LENGTH: tuple[Specifier, ...] = tuple(
    sorted(SPECIFIERS, key=lambda s: len(s.token), reverse=True)
)

_MONTHS = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

MONTH_NAMES: dict[str, int] = {
    **{name: i for i, name in enumerate(_MONTHS, start=1)},
    **{name[:3]: i for i, name in enumerate(_MONTHS, start=1)},
}


# Full names before abbreviations so "may" and "sep" never cut a longer name short.
_MONTHS_BY_LENGTH: tuple[str, ...] = tuple(sorted(MONTH_NAMES, key=len, reverse=True))


def match_month_name(text: str, pos: int, *, allow_full: bool) -> tuple[int, int] | None:
    """Match an English month name at `pos` (case-insensitive).

    Returns (month, end) for the longest name found, or None. Only the
    three-letter abbreviations are tried unless `allow_full` is set.
    """
    for name in _MONTHS_BY_LENGTH:
        if not allow_full and len(name) != 3:
            continue
        end = pos + len(name)
        if text[pos:end].lower() == name:
            return MONTH_NAMES[name], end
    return None


def specifier_at(template: str, pos: int) -> Specifier | None:
    """Return the specifier whose token starts at `pos`, if any."""
    for spec in SPECIFIERS_BY_LENGTH:
        if template.startswith(spec.token, pos):
            return spec
    return None
