"""Built-in primitives for the minilisp root environment.

This module defines arithmetic, comparison, list processing and predicate
primitives, plus the registration helpers that build the standard
environment. Every primitive receives the evaluated argument tuple and
returns a fresh Expression; arguments are never mutated.
"""
from __future__ import annotations

import math
import operator
from functools import reduce
from typing import Callable

from minilisp.errors import ArityMismatch, EmptyListAccess, LispTypeError
from minilisp.types.environment import Environment
from minilisp.types.expression import (
    Expression,
    FALSE,
    Kind,
    NIL,
    TRUE,
    boolean,
)

Args = tuple[Expression, ...]


# -------------------------------
# Argument checks
# -------------------------------
def _expect_arity(name: str, args: Args, count: int) -> None:
    if len(args) != count:
        raise ArityMismatch(f"{name} requires exactly {count} argument(s), got {len(args)}")


def _numbers(name: str, args: Args) -> list[float]:
    if not args:
        raise ArityMismatch(f"{name} requires at least 1 argument")
    for arg in args:
        if not arg.is_number:
            raise LispTypeError(f"All arguments to {name} must be numbers, got {arg!r}")
    return [arg.as_number() for arg in args]


def _sequence(name: str, arg: Expression) -> Expression:
    if not arg.is_sequence:
        raise LispTypeError(f"{name} expects a list, got {arg!r}")
    return arg


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: Args) -> Expression:
    """Left-fold sum of all arguments."""
    return Expression.number(reduce(operator.add, _numbers("+", args)))


def sub(args: Args) -> Expression:
    """Subtract every later argument from the first; (- x) is just x."""
    return Expression.number(reduce(operator.sub, _numbers("-", args)))


def mul(args: Args) -> Expression:
    """Left-fold product of all arguments."""
    return Expression.number(reduce(operator.mul, _numbers("*", args)))


def _ieee_divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def div(args: Args) -> Expression:
    """Divide left-to-right; division by zero yields inf or nan as doubles do."""
    return Expression.number(reduce(_ieee_divide, _numbers("/", args)))


def abs_builtin(args: Args) -> Expression:
    _expect_arity("abs", args, 1)
    return Expression.number(abs(_numbers("abs", args)[0]))


# -------------------------------
# Comparison
# -------------------------------
def _comparison(name: str, op: Callable[[float, float], bool]) -> Callable[[Args], Expression]:
    def compare(args: Args) -> Expression:
        _expect_arity(name, args, 2)
        a, b = _numbers(name, args)
        return boolean(op(a, b))

    compare.__name__ = f"compare_{op.__name__}"
    return compare


eq = _comparison("=", operator.eq)
lt = _comparison("<", operator.lt)
gt = _comparison(">", operator.gt)
lte = _comparison("<=", operator.le)
gte = _comparison(">=", operator.ge)


def logical_not(args: Args) -> Expression:
    """#t exactly when the argument is #f."""
    _expect_arity("not", args, 1)
    return boolean(args[0] == FALSE)


# -------------------------------
# List operations
# -------------------------------
def list_builtin(args: Args) -> Expression:
    """Retag the evaluated arguments as a LIST value."""
    return Expression.list(args)


def car(args: Args) -> Expression:
    _expect_arity("car", args, 1)
    xs = _sequence("car", args[0])
    if not xs.items:
        raise EmptyListAccess("car of an empty list")
    return xs.items[0]


def cdr(args: Args) -> Expression:
    """Everything but the first element, keeping the argument's tag."""
    _expect_arity("cdr", args, 1)
    xs = _sequence("cdr", args[0])
    if not xs.items:
        raise EmptyListAccess("cdr of an empty list")
    return Expression.sequence(xs.kind, xs.items[1:])


def cons(args: Args) -> Expression:
    """Prepend the first argument onto the second, keeping the second's tag."""
    _expect_arity("cons", args, 2)
    head, tail = args
    tail = _sequence("cons", tail)
    return Expression.sequence(tail.kind, (head, *tail.items))


def append(args: Args) -> Expression:
    """Concatenate two lists; the result carries the first list's tag."""
    _expect_arity("append", args, 2)
    first = _sequence("append", args[0])
    second = _sequence("append", args[1])
    return Expression.sequence(first.kind, first.items + second.items)


def length(args: Args) -> Expression:
    _expect_arity("length", args, 1)
    return Expression.number(len(_sequence("length", args[0]).items))


def is_list(args: Args) -> Expression:
    """Predicate: #t only for values tagged LIST (a quoted FORM is not one)."""
    _expect_arity("list?", args, 1)
    return boolean(args[0].kind is Kind.LIST)


def null(args: Args) -> Expression:
    _expect_arity("null?", args, 1)
    return boolean(not _sequence("null?", args[0]).items)


def begin(args: Args) -> Expression:
    """Arguments are already evaluated in order; hand back the last one."""
    if not args:
        raise ArityMismatch("begin requires at least 1 argument")
    return args[-1]


PRIMITIVES: dict[str, Callable[[Args], Expression]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": eq,
    "<": lt,
    ">": gt,
    "<=": lte,
    ">=": gte,
    "abs": abs_builtin,
    "not": logical_not,
    "list": list_builtin,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "append": append,
    "length": length,
    "list?": is_list,
    "null?": null,
    "begin": begin,
}


def register(env: Environment) -> None:
    """Register all builtin primitives and constants into the given environment."""
    env.update({name: Expression.primitive(fn) for name, fn in PRIMITIVES.items()})
    env.define("nil", NIL)
    env.define("#t", TRUE)
    env.define("#f", FALSE)


def standard_environment() -> Environment:
    """A fresh root environment holding the standard library."""
    env = Environment()
    register(env)
    return env
