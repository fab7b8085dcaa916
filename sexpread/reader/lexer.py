"""
  Lisp Tokenizer

- Lazy: tokens are produced one at a time from a cursor over the source
- Whitespace and `;` line comments are skipped before every token
- Token rules are tried in a fixed priority order, first match wins
- Some rules are boundary-gated: the match only counts if it is followed by
  whitespace, `(`, `)`, `;` or the end of input. This is what makes `12abc`
  a single symbol rather than the number 12 followed by `abc`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from sexpread.errors import SexpParseError

logger = logging.getLogger(__name__)


class TokenType(Enum):
    LPAREN = "("
    RPAREN = ")"
    DOT = "."
    QUOTE = "'"
    NUMBER = "number"
    SYMBOL = "symbol"


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)


# (type, pattern, boundary-gated)
TOKEN_RULES: tuple[tuple[TokenType, re.Pattern, bool], ...] = (
    (TokenType.LPAREN, re.compile(r"\("), False),
    (TokenType.RPAREN, re.compile(r"\)"), False),
    (TokenType.DOT, re.compile(r"\."), True),
    (TokenType.QUOTE, re.compile(r"'"), False),
    (TokenType.NUMBER, re.compile(r"-?(?:\.[0-9]+|[0-9]+\.[0-9]*|[0-9]+)"), True),
    (TokenType.SYMBOL, re.compile(r"[^\s();]+"), True),
)

BOUNDARY_RE = re.compile(r"[\s();]")


class Tokenizer:
    """Cursor over a source string that hands out one Token at a time."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self._last: Optional[Token] = None

    def consumed(self) -> str:
        return self.source[: self.pos]

    def remaining(self) -> str:
        return self.source[self.pos:]

    def error(self, reason: str | None = None) -> SexpParseError:
        """Build a parse error pointing at the current cursor position."""
        return SexpParseError(self.consumed(), self.remaining(), reason)

    def skip_whitespace(self) -> None:
        """Skip any mix of whitespace and `;`-to-end-of-line comments."""
        source, pos, n = self.source, self.pos, len(self.source)
        in_comment = False
        while pos < n:
            c = source[pos]
            if in_comment:
                if c == "\n":
                    in_comment = False
            elif c == ";":
                in_comment = True
            elif not c.isspace():
                break
            pos += 1
        self.pos = pos

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _at_boundary(self, pos: int) -> bool:
        return pos >= len(self.source) or BOUNDARY_RE.match(self.source, pos) is not None

    def read_token(self) -> Optional[Token]:
        """Read a single token. Returns None at end of input."""
        self.skip_whitespace()
        if self.at_end():
            self._last = None
            return None

        for token_type, pattern, gated in TOKEN_RULES:
            m = pattern.match(self.source, self.pos)
            if m is None:
                continue
            if gated and not self._at_boundary(m.end()):
                continue
            token = Token(token_type, m.group(0), self.pos)
            self.pos = m.end()
            self._last = token
            return token

        # Unreachable while the symbol rule accepts any non-delimiter run
        logger.debug("no token rule matches at offset %d", self.pos)
        raise self.error("unrecognised token")

    def unread_token(self, token: Token) -> None:
        """Push back the most recently read token so the next read returns it again."""
        if token is not self._last or token.end != self.pos:
            raise ValueError("only the most recently read token can be pushed back")
        self.pos = token.start
        self._last = None

    def tokens(self) -> Iterator[Token]:
        """Yield the remaining tokens lazily."""
        while (token := self.read_token()) is not None:
            yield token


def lex(source: str) -> Iterator[Token]:
    """Token generator over a whole source string."""
    return Tokenizer(source).tokens()
