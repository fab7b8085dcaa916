from __future__ import annotations

import logging
import operator
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping, Optional, Sequence

from sexpread import Term
from sexpread.builtin.checks import (
    check_all_numbers,
    check_min_args,
    check_num_args,
    check_type,
)
from sexpread.errors import SexpEvaluatorMissing, SexpZeroDivisionError
from sexpread.types import (
    Cons,
    Func,
    Nil,
    Number,
    T,
    TermKind,
    bool_term,
    list_to_term,
)
from sexpread.types.environment import Environment

if TYPE_CHECKING:
    from sexpread.runtime import Backend

logger = logging.getLogger(__name__)


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: Sequence[Term]) -> Term:
    check_all_numbers(args, "+")
    result = 0.0
    for a in args:
        result += a.value
    return Number(result)


def mul(args: Sequence[Term]) -> Term:
    check_all_numbers(args, "*")
    result = 1.0
    for a in args:
        result *= a.value
    return Number(result)


def sub(args: Sequence[Term]) -> Term:
    check_all_numbers(args, "-")
    check_min_args("-", 1, args)
    if len(args) == 1:
        return Number(-args[0].value)
    result = args[0].value
    for a in args[1:]:
        result -= a.value
    return Number(result)


def div(args: Sequence[Term]) -> Term:
    check_all_numbers(args, "/")
    check_min_args("/", 1, args)
    if len(args) == 1:
        if args[0].value == 0:
            raise SexpZeroDivisionError("/")
        return Number(1 / args[0].value)
    result = args[0].value
    for a in args[1:]:
        if a.value == 0:
            raise SexpZeroDivisionError("/")
        result /= a.value
    return Number(result)


# -------------------------------
# Comparison
# -------------------------------
def compare_func(name: str, op: Callable[[float, float], bool]) -> Func:
    def compare(args: Sequence[Term]) -> Term:
        check_num_args(name, 2, args)
        check_type(args[0], TermKind.NUMBER, name)
        check_type(args[1], TermKind.NUMBER, name)
        return bool_term(op(args[0].value, args[1].value))

    return Func(name, compare)


# -------------------------------
# List operations
# -------------------------------
def list_builtin(args: Sequence[Term]) -> Term:
    return list_to_term(args)


def cons(args: Sequence[Term]) -> Term:
    check_num_args("cons", 2, args)
    return Cons(args[0], args[1])


def car(args: Sequence[Term]) -> Term:
    check_num_args("car", 1, args)
    check_type(args[0], TermKind.CONS, "car")
    return args[0].car


def cdr(args: Sequence[Term]) -> Term:
    check_num_args("cdr", 1, args)
    check_type(args[0], TermKind.CONS, "cdr")
    return args[0].cdr


def is_empty(args: Sequence[Term]) -> Term:
    check_num_args("empty?", 1, args)
    return bool_term(args[0] is Nil)


# -------------------------------
# Evaluation
# -------------------------------
def eval_func(env: Environment, backend: Optional[Backend]) -> Func:
    def eval_builtin(args: Sequence[Term]) -> Term:
        check_num_args("eval", 1, args)
        if backend is None:
            raise SexpEvaluatorMissing("eval: no evaluator backend attached")
        return backend.eval(args[0], env)

    return Func("eval", eval_builtin)


# -------------------------------
# Registration
# -------------------------------
def builtin_table(env: Environment, backend: Optional[Backend] = None) -> Mapping[str, Func]:
    """Build the read-only operator-name -> procedure table. `eval` evaluates in `env`."""
    table: dict[str, Func] = {
        "+": Func("+", add),
        "*": Func("*", mul),
        "-": Func("-", sub),
        "/": Func("/", div),
        "list": Func("list", list_builtin),
        "cons": Func("cons", cons),
        "car": Func("car", car),
        "cdr": Func("cdr", cdr),
        "empty?": Func("empty?", is_empty),
        "eval": eval_func(env, backend),
    }
    for name, op in (
        ("=", operator.eq),
        ("/=", operator.ne),
        (">", operator.gt),
        (">=", operator.ge),
        ("<", operator.lt),
        ("<=", operator.le),
    ):
        table[name] = compare_func(name, op)
    return MappingProxyType(table)


def register(env: Environment, backend: Optional[Backend] = None) -> Mapping[str, Func]:
    table = builtin_table(env, backend)
    for name, func in table.items():
        env.define(name, func)
    env.define(T, T)
    logger.debug("registered %d builtins", len(table))
    return table
