import pytest

from sexpread.errors import SexpTypeError
from sexpread.printer import format_number, render
from sexpread.reader.parser import parse
from sexpread.types import Cons, Func, Nil, Number, Symbol, list_to_term


@pytest.mark.parametrize(
    "value,expected",
    [
        (3.0, "3"),
        (-5.0, "-5"),
        (0.5, "0.5"),
        (-0.25, "-0.25"),
        (1e-05, "0.00001"),
        (1e16, "10000000000000000"),
        (-0.0, "-0"),
        (float("inf"), "inf"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(1 2 3)", "(1 2 3)"),
        ("(1 2 . 3)", "(1 2 . 3)"),
        ("(a . (b . nil))", "(a b)"),
        ("'x", "'x"),
        ("(quote x)", "'x"),
        ("(quote x y)", "(quote x y)"),
        ("(FOO (Bar) ())", "(foo (bar) nil)"),
        ("nil", "nil"),
        ("1.", "1"),
    ],
)
def test_render(source, expected):
    assert render(parse(source)) == expected


def test_str_uses_lisp_syntax():
    assert str(Cons(Number(1), Cons(Symbol("a"), Nil))) == "(1 a)"
    assert str(Number(2.5)) == "2.5"
    assert str(Symbol("X")) == "x"


def test_render_int_valued_numbers():
    assert render(Number(1)) == "1"
    assert render(list_to_term([Number(2), Number(-7)])) == "(2 -7)"


def test_render_deep_nesting():
    depth = 20_000
    term = Symbol("x")
    for _ in range(depth):
        term = Cons(term, Nil)
    assert render(term) == "(" * depth + "x" + ")" * depth


def test_render_func():
    assert render(Func("+", lambda args: Nil)) == "#<function +>"


def test_render_rejects_python_values():
    with pytest.raises(SexpTypeError):
        render([1, 2])
