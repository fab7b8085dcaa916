from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from sexpread import Term, BuiltinFn


@dataclass(frozen=True, eq=False)
class Func:
    """A named primitive procedure. Argument checking is done by `fn` itself."""

    name: str
    fn: BuiltinFn

    def __call__(self, args: Sequence[Term]) -> Term:
        return self.fn(list(args))

    def __str__(self) -> str:
        return f"#<function {self.name}>"
