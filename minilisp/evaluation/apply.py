"""Application engine for minilisp.

Centralizes the function-application protocol: closures get a fresh child of
their captured environment with parameters bound; primitives are called with
the evaluated argument tuple. Anything else in operator position is a type
error.
"""

from __future__ import annotations

from typing import Sequence

from minilisp import EvaluatorFn
from minilisp.errors import LispTypeError
from minilisp.types.bind import bind_arguments
from minilisp.types.expression import Expression, Kind


def apply_closure(
    fn: Expression, args: Sequence[Expression], evaluate_fn: EvaluatorFn
) -> Expression:
    """Evaluate a closure's body in a new scope whose parent is the closure's env.

    No tail-call elimination: every nested call costs Python stack depth.
    """
    call_env = bind_arguments(fn.params, args, fn.env)
    return evaluate_fn(fn.body, call_env)


def apply(
    fn: Expression, args: Sequence[Expression], evaluate_fn: EvaluatorFn
) -> Expression:
    match fn.kind:
        case Kind.CLOSURE:
            return apply_closure(fn, args, evaluate_fn)
        case Kind.PRIMITIVE:
            return fn.func(tuple(args))
    raise LispTypeError(f"Cannot apply non-function {fn!r}")
