"""Cons cells and the helpers that convert between Python sequences and Lisp lists."""

from __future__ import annotations

from typing import Iterable, Iterator

from sexpread import Term
from sexpread.types.nil import Nil


class Cons:
    """An immutable pair. Chains of Cons ending in Nil are proper lists."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: Term, cdr: Term):
        object.__setattr__(self, "car", car)
        object.__setattr__(self, "cdr", cdr)

    def __setattr__(self, name, value):
        raise AttributeError(f"Cons cells are immutable (cannot set {name})")

    def __eq__(self, other: object) -> bool:
        # Explicit worklist: neither car nor cdr nesting may exhaust the stack
        pending: list[tuple[Term, Term]] = [(self, other)]
        while pending:
            a, b = pending.pop()
            if a is b:
                continue
            if isinstance(a, Cons) and isinstance(b, Cons):
                pending.append((a.cdr, b.cdr))
                pending.append((a.car, b.car))
            elif isinstance(a, Cons) or isinstance(b, Cons):
                return False
            elif a != b:
                return False
        return True

    def __hash__(self) -> int:
        # Pre-order walk; the Cons marker keeps distinct shapes apart
        parts: list[Term] = []
        pending: list[Term] = [self]
        while pending:
            node = pending.pop()
            if isinstance(node, Cons):
                parts.append(Cons)
                pending.append(node.cdr)
                pending.append(node.car)
            else:
                parts.append(node)
        return hash(tuple(parts))

    def __iter__(self) -> Iterator[Term]:
        """Iterate the elements of the list; an improper tail is not yielded."""
        node: Term = self
        while isinstance(node, Cons):
            yield node.car
            node = node.cdr

    def __repr__(self) -> str:
        return f"Cons({self.car!r}, {self.cdr!r})"

    def __str__(self) -> str:
        from sexpread.printer import render
        return render(self)


def list_to_term(elements: Iterable[Term], tail: Term = Nil) -> Term:
    """
    Build a right-nested chain of Cons cells holding `elements` in order,
    whose final cdr is `tail`. With no elements the result is `tail` itself.
    """
    result = tail
    for element in reversed(list(elements)):
        result = Cons(element, result)
    return result


def term_to_list(term: Term) -> tuple[list[Term], Term]:
    """Split a cons chain into its elements and its final tail (Nil for proper lists)."""
    items: list[Term] = []
    while isinstance(term, Cons):
        items.append(term.car)
        term = term.cdr
    return items, term
