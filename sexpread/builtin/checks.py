"""Argument validation shared by every primitive procedure.

Each helper raises on failure and returns nothing on success, so a builtin
body can run its checks up front and then assume well-typed arguments.
"""

from __future__ import annotations

from typing import Sequence

from sexpread import Term
from sexpread.errors import SexpArityError, SexpTypeError
from sexpread.types import TermKind, kind_of


def check_type(term: Term, expected: TermKind, procedure: str | None = None) -> None:
    actual = kind_of(term)
    if actual is not expected:
        raise SexpTypeError(expected, actual, procedure)


def check_num_args(name: str, expected: int, args: Sequence[Term]) -> None:
    if len(args) != expected:
        raise SexpArityError(name, expected, len(args))


def check_min_args(name: str, minimum: int, args: Sequence[Term]) -> None:
    if len(args) < minimum:
        raise SexpArityError(name, minimum, len(args), at_least=True)


def check_all_numbers(args: Sequence[Term], procedure: str | None = None) -> None:
    for arg in args:
        check_type(arg, TermKind.NUMBER, procedure)
