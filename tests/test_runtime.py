import pytest

from sexpread.errors import SexpEvaluatorMissing, SexpUnboundSymbol, SexpZeroDivisionError
from sexpread.runtime import Runtime
from sexpread.types import Cons, Nil, Number, Symbol, T, list_to_term


@pytest.fixture
def runtime(backend):
    return Runtime(backend)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", Number(6)),
        ("(- 5)", Number(-5)),
        ("(= 1 1)", T),
        ("(< 2 1)", Nil),
        ("(car (cons 1 2))", Number(1)),
        ("(cdr '(1 2))", list_to_term([Number(2)])),
        ("(list 1 (* 2 3))", list_to_term([Number(1), Number(6)])),
        ("(empty? nil)", T),
        ("(EMPTY? (LIST 1))", Nil),
        ("(eval '(+ 1 2))", Number(3)),
        ("t", T),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", Number(57)),
        ("1 2 3", Number(3)),
        ("", Nil),
    ],
)
def test_runtime_eval(runtime, source, expected):
    assert runtime.eval(source) == expected


def test_divide_by_zero_propagates(runtime):
    with pytest.raises(SexpZeroDivisionError):
        runtime.eval("(/ 1 0)")


def test_eval_requires_backend():
    with pytest.raises(SexpEvaluatorMissing):
        Runtime().eval("(+ 1 2)")


def test_read(runtime):
    assert runtime.read("a 'b") == [Symbol("a"), Cons(Symbol("quote"), Cons(Symbol("b"), Nil))]


def test_call(runtime):
    assert runtime.call("+", Number(1), Number(2)) == Number(3)
    assert runtime.call("CAR", Cons(Number(1), Nil)) == Number(1)
    with pytest.raises(SexpUnboundSymbol):
        runtime.call("no-such-proc")


def test_builtins_are_bound_in_environment(runtime):
    assert runtime.env.lookup("cons") is runtime.builtins["cons"]
