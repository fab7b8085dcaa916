import pytest

from sexpread.builtin.env_builtin import builtin_table, register
from sexpread.types import Cons, QUOTE, Symbol
from sexpread.types.environment import Environment


class TinyBackend:
    """Minimal stand-in for the external evaluator: enough to drive builtins from source."""

    def __init__(self):
        self.calls = []

    def eval(self, term, env):
        self.calls.append(term)
        if isinstance(term, Symbol):
            return env.lookup(term)
        if isinstance(term, Cons):
            if term.car == QUOTE:
                return term.cdr.car
            fn = self.eval(term.car, env)
            return fn([self.eval(arg, env) for arg in term.cdr])
        return term


@pytest.fixture
def backend():
    return TinyBackend()


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def builtins():
    return builtin_table(Environment())
