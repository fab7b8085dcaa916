"""
  Lisp Reader

Descent over the Tokenizer with one token of lookahead (pushback). Open lists
and quotes are kept on an explicit stack of frames, so nesting depth is bounded
by the input (and the optional `max_depth`), never by the Python call stack.

   - numbers -> Number (double)
   - symbols -> Symbol, lowercased; `nil` in any case -> Nil
   - 'x -> (quote x)
   - (a b c) -> Cons chain ending in Nil
   - (a b . c) -> Cons chain ending in c

`read_term` returns None when no term is available: at end of input, or when
the next token cannot start a term (a `)` or `.`), in which case the token is
pushed back for the caller to inspect.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from sexpread import Term
from sexpread.config import get_max_depth
from sexpread.errors import SexpParseError
from sexpread.reader.lexer import Tokenizer, TokenType
from sexpread.types.cons import Cons, list_to_term
from sexpread.types.nil import Nil
from sexpread.types.number import Number
from sexpread.types.symbol import Symbol, QUOTE

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """An open `'` or `(` still waiting for its terms."""

    quote: bool = False
    items: list[Term] = field(default_factory=list)
    # set once the list has seen its '.'; the next term is the tail
    dotted: bool = False


class Parser:
    """Owns a cursor over one source string. Not meant to be shared between callers."""

    def __init__(self, source: str, max_depth: int | None = None):
        self.tokenizer = Tokenizer(source)
        # 0 means no reader-imposed limit
        self.max_depth: int = get_max_depth() if max_depth is None else max_depth

    def parse_error(self, reason: str | None = None) -> SexpParseError:
        err = self.tokenizer.error(reason)
        logger.debug("%s", err)
        return err

    def empty(self) -> bool:
        """True when only whitespace and comments remain."""
        self.tokenizer.skip_whitespace()
        return self.tokenizer.at_end()

    def ensure_empty(self) -> None:
        if not self.empty():
            raise self.parse_error("unexpected trailing input")

    def _expect_close(self) -> None:
        tok = self.tokenizer.read_token()
        if tok is None:
            raise self.parse_error("missing ')'")
        if tok.type is not TokenType.RPAREN:
            raise self.parse_error("expected ')'")

    def read_term(self) -> Optional[Term]:
        """Try to read one term. Returns None on end of input or a token that cannot start a term."""
        stack: list[_Frame] = []
        while True:
            tok = self.tokenizer.read_token()
            term: Optional[Term] = None
            if tok is not None:
                match tok.type:
                    case TokenType.NUMBER:
                        term = Number(float(tok.text))

                    case TokenType.SYMBOL:
                        name = tok.text.lower()
                        term = Nil if name == "nil" else Symbol(name)

                    case TokenType.QUOTE | TokenType.LPAREN:
                        stack.append(_Frame(quote=tok.type is TokenType.QUOTE))
                        if self.max_depth and len(stack) > self.max_depth:
                            raise self.parse_error(f"nesting deeper than {self.max_depth}")
                        continue

                    case _:
                        self.tokenizer.unread_token(tok)

            # Hand the term, or its absence, to the innermost open frame
            while stack:
                frame = stack[-1]
                if frame.quote:
                    if term is None:
                        raise self.parse_error("expected a term after quote")
                    stack.pop()
                    term = Cons(QUOTE, Cons(term, Nil))
                elif frame.dotted:
                    if term is None:
                        raise self.parse_error("expected a term after '.'")
                    self._expect_close()
                    stack.pop()
                    term = list_to_term(frame.items, term)
                elif term is not None:
                    frame.items.append(term)
                    break
                else:
                    # No more elements: the list ends with ')' or '. tail)'
                    tok = self.tokenizer.read_token()
                    if tok is None:
                        raise self.parse_error("missing ')'")
                    if tok.type is TokenType.DOT:
                        frame.dotted = True
                        break
                    if tok.type is not TokenType.RPAREN:
                        raise self.parse_error("expected ')'")
                    stack.pop()
                    term = list_to_term(frame.items)
            else:
                return term

    def read_all(self) -> Iterator[Term]:
        """Yield each top-level term in turn, failing on anything that is not a term."""
        while (term := self.read_term()) is not None:
            yield term
        self.ensure_empty()


def parse(source: str, max_depth: int | None = None) -> Optional[Term]:
    """Parse exactly one term from `source`. Returns None if the string holds no term."""
    parser = Parser(source, max_depth)
    term = parser.read_term()
    parser.ensure_empty()
    return term


def read_all(source: str, max_depth: int | None = None) -> Iterator[Term]:
    """Lazily read every top-level term in `source`."""
    return Parser(source, max_depth).read_all()
