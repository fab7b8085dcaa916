from __future__ import annotations
import sys


class Symbol:
    """
    A case-insensitive name. The name is folded to lowercase once, at creation,
    so `Symbol("CAR") == Symbol("car")`. Interning is an optimisation only;
    equality never relies on identity.
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        if not name:
            raise ValueError("symbol name must not be empty")
        self.name = sys.intern(name.lower())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash((Symbol, self.name))

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


# Canonical truth value; self-quoting
T = Symbol("t")
QUOTE = Symbol("quote")
