from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Number:
    """A double-precision number. Equality is IEEE equality of `value`."""

    value: float

    def __post_init__(self):
        # Every construction path stores a double, whatever numeric type it was given
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        from sexpread.printer import render
        return render(self)
