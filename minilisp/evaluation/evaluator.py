"""Core evaluator for the minilisp interpreter.

Plain recursive descent: symbols are looked up, atoms and values evaluate to
themselves, FORMs headed by a special-form name go to their handler, and every
other non-empty sequence is a function application.
"""

from __future__ import annotations

from minilisp.types.environment import Environment
from minilisp.types.expression import Expression, Kind
from minilisp.evaluation.apply import apply
from minilisp.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: Expression, env: Environment) -> Expression:
    """Evaluate `expr` in `env`. Only `define` mutates `env`."""
    match expr.kind:
        case Kind.SYMBOL:
            return env.lookup(expr.as_symbol())
        case Kind.LIST | Kind.FORM if expr.items:
            head, *tail_args = expr.items

            if head.is_symbol:
                handler = SPECIAL_FORMS.get(head.as_symbol())
                if handler is not None:
                    return handler(tail_args, env, evaluate)

            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, evaluate)

    # --- Numbers, the empty list and runtime values return as-is ---
    return expr
