from __future__ import annotations

from typing import Sequence

from minilisp.errors import ArityMismatch
from minilisp.types.environment import Environment
from minilisp.types.expression import Expression


def bind_arguments(
    params: Expression,
    supplied_args: Sequence[Expression],
    closure_env: Environment,
) -> Environment:
    """
    Bind evaluated arguments to a closure's parameter symbols, in order.

    Returns a new Environment whose outer is `closure_env`. The parameter and
    argument counts must match exactly; ArityMismatch is raised otherwise.
    """
    names = [p.as_symbol() for p in params.items]
    if len(names) != len(supplied_args):
        raise ArityMismatch(
            f"Expected {len(names)} argument(s) ({' '.join(names)}), got {len(supplied_args)}"
        )
    local_env = Environment(outer=closure_env)
    for name, value in zip(names, supplied_args):
        local_env.define(name, value)
    return local_env
