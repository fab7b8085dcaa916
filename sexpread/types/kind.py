from __future__ import annotations
from enum import Enum


class TermKind(Enum):
    NUMBER = "number"
    SYMBOL = "symbol"
    CONS = "cons"
    NIL = "nil"
    FUNC = "function"

    def __str__(self) -> str:
        return self.value
