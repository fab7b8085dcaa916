from __future__ import annotations

from typing import Mapping, Protocol

from sexpread import Term
from sexpread.builtin.env_builtin import register
from sexpread.errors import SexpEvaluatorMissing, SexpUnboundSymbol
from sexpread.reader.parser import read_all
from sexpread.types import Func, Nil, Symbol
from sexpread.types.environment import Environment


class Backend(Protocol):
    def eval(self, term: Term, env: Environment) -> Term: ...


class Runtime:
    """
    Owns the global Environment and the builtin table, built once at construction
    and read-only afterwards. Evaluation is delegated to a pluggable Backend.
    """

    def __init__(self, backend: Backend | None = None):
        self.backend = backend
        self.env: Environment = Environment()
        self.builtins: Mapping[str, Func] = register(self.env, backend)

    def read(self, source: str) -> list[Term]:
        """Read every top-level term in `source`."""
        return list(read_all(source))

    def eval(self, source: str) -> Term:
        """Evaluate each top-level form in turn and return the last result, or Nil."""
        if self.backend is None:
            raise SexpEvaluatorMissing("no evaluator backend attached")
        result: Term = Nil
        for term in read_all(source):
            result = self.backend.eval(term, self.env)
        return result

    def call(self, name: str, *args: Term) -> Term:
        """Invoke a primitive by operator name with already-evaluated arguments."""
        func = self.builtins.get(name.lower())
        if func is None:
            raise SexpUnboundSymbol(Symbol(name))
        return func(args)
