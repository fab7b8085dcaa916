"""Global bindings for sexpread.

The Environment stores bindings of Symbols to Terms and supports nested scopes
via an `outer` link. The builtin layer populates one root Environment at
startup; an external evaluator receives it by reference.
"""

from __future__ import annotations

from typing import Iterator, Optional

from sexpread import Term
from sexpread.errors import SexpTypeError, SexpUnboundSymbol
from sexpread.types.kind import TermKind
from sexpread.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Terms."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Term] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol | str, value: Term) -> None:
        """Bind `name` to `value` in this scope. Strings are converted to Symbols."""
        if isinstance(name, str):
            name = Symbol(name)
        if not isinstance(name, Symbol):
            raise SexpTypeError(TermKind.SYMBOL, type(name).__name__, "define")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol | str) -> Term:
        """Look up the value bound to `name`, raising SexpUnboundSymbol if absent."""
        if isinstance(name, str):
            name = Symbol(name)
        env = self.find(name)
        if env is None:
            raise SexpUnboundSymbol(name)
        return env.vars[name]

    def __contains__(self, name: Symbol | str) -> bool:
        if isinstance(name, str):
            name = Symbol(name)
        return self.find(name) is not None

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def __repr__(self) -> str:
        return f"Environment({len(self.vars)} bindings, outer={'yes' if self.outer else 'no'})"
