from minilisp import EvaluatorFn
from minilisp.errors import ArityMismatch
from minilisp.types.environment import Environment
from minilisp.types.expression import Expression, TRUE


def if_form(
    tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> Expression:
    if len(tail) != 3:
        raise ArityMismatch("if requires a test, a then-branch and an else-branch")

    test, then, alt = tail
    # Only the canonical #t symbol selects the then-branch
    if evaluate_fn(test, env) == TRUE:
        return evaluate_fn(then, env)
    return evaluate_fn(alt, env)
