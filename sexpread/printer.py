"""Render Terms back to Lisp surface syntax.

The output re-reads to an equal Term: numbers are written without exponent
notation (which the reader does not accept), and `(quote x)` is written as `'x`.
"""

from __future__ import annotations

import math
from decimal import Decimal
from io import StringIO

from sexpread import Term
from sexpread.errors import SexpTypeError
from sexpread.types.cons import Cons, term_to_list
from sexpread.types.func import Func
from sexpread.types.nil import NilType
from sexpread.types.number import Number
from sexpread.types.symbol import Symbol, QUOTE


def format_number(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        # Not produced by the reader; only reachable through builtin overflow
        return repr(value)
    if value == 0 and math.copysign(1.0, value) < 0:
        return "-0"
    if value.is_integer():
        return str(int(value))
    # Shortest round-tripping digits, laid out positionally
    return format(Decimal(repr(value)), "f")


def _is_quote_form(term: Term) -> bool:
    return (
        isinstance(term, Cons)
        and term.car == QUOTE
        and isinstance(term.cdr, Cons)
        and isinstance(term.cdr.cdr, NilType)
    )


class _Text(str):
    """Literal output queued between terms."""


def _write(term: Term, out: StringIO) -> None:
    # Explicit stack of pending terms and text, so deep nesting never recurses
    pending: list[Term] = [term]
    while pending:
        term = pending.pop()
        if isinstance(term, _Text):
            out.write(term)
        elif isinstance(term, Number):
            out.write(format_number(term.value))
        elif isinstance(term, Symbol):
            out.write(term.name)
        elif isinstance(term, NilType):
            out.write("nil")
        elif isinstance(term, Func):
            out.write(str(term))
        elif _is_quote_form(term):
            out.write("'")
            pending.append(term.cdr.car)
        elif isinstance(term, Cons):
            items, tail = term_to_list(term)
            out.write("(")
            pending.append(_Text(")"))
            if not isinstance(tail, NilType):
                pending.append(tail)
                pending.append(_Text(" . "))
            for i in range(len(items) - 1, -1, -1):
                pending.append(items[i])
                if i:
                    pending.append(_Text(" "))
        else:
            raise SexpTypeError("term", type(term).__name__, "render")


def render(term: Term) -> str:
    with StringIO() as buffer:
        _write(term, buffer)
        return buffer.getvalue()
