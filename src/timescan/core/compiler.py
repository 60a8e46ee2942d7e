"""Format template compiler.

Turns a strftime-like template such as ``%d/%b/%Y:%H:%M:%S%.f`` into a regular
expression that finds candidate timestamps inside arbitrary text.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache

from .specifiers import Specifier, SpecifierKind, specifier_at

logger = logging.getLogger(__name__)

Token = Specifier | str


class FormatCompileError(ValueError):
    """Raised when a template does not compile into a valid search pattern."""

    def __init__(self, template: str, reason: str) -> None:
        super().__init__(f"Invalid timestamp format {template!r}: {reason}")
        self.template = template
        self.reason = reason


@dataclass(frozen=True, slots=True)
class CompiledFormat:
    """A template together with its token stream and search pattern."""

    template: str
    tokens: tuple[Token, ...]
    pattern: re.Pattern[str]

    def search(self, text: str) -> tuple[str, tuple[int, int]] | None:
        """Return the leftmost candidate substring and its span."""
        m = self.pattern.search(text)
        if m is None:
            return None
        return m.group(0), m.span()

    @property
    def specifiers(self) -> tuple[Specifier, ...]:
        return tuple(t for t in self.tokens if isinstance(t, Specifier))


def tokenize_format(template: str) -> tuple[Token, ...]:
    """Split a template into specifiers and literal runs.

    Tokens are matched whole and longest-first, so ``%y`` never eats the
    prefix of another token. Unknown ``%`` sequences stay literal text.
    """
    tokens: list[Token] = []
    literal: list[str] = []
    i = 0
    while i < len(template):
        spec = specifier_at(template, i)
        if spec is None:
            literal.append(template[i])
            i += 1
            continue
        if spec.kind == SpecifierKind.LITERAL:
            literal.append(spec.fragment)
        else:
            if literal:
                tokens.append("".join(literal))
                literal = []
            tokens.append(spec)
        i += len(spec.token)

    if literal:
        tokens.append("".join(literal))
    return tuple(tokens)


def _to_regex(tokens: tuple[Token, ...]) -> str:
    parts: list[str] = []
    for tok in tokens:
        if isinstance(tok, Specifier):
            parts.append(f"(?:{tok.fragment})")
        else:
            parts.append(re.escape(tok))
    return "".join(parts)


@lru_cache(maxsize=128)
def compile_format(template: str) -> CompiledFormat:
    """Compile a format template into a search pattern."""
    tokens = tokenize_format(template)
    source = _to_regex(tokens)
    try:
        pattern = re.compile(source)
    except re.error as e:
        logger.debug("Template %r produced invalid regex %r: %s", template, source, e)
        raise FormatCompileError(template, str(e)) from e
    return CompiledFormat(template=template, tokens=tokens, pattern=pattern)
