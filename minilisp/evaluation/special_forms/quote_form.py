from minilisp import EvaluatorFn
from minilisp.errors import ArityMismatch
from minilisp.types.environment import Environment
from minilisp.types.expression import Expression


def quote_form(
    tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> Expression:
    """(quote datum) returns datum unevaluated, FORMs included."""
    if len(tail) != 1:
        raise ArityMismatch("quote expects exactly 1 argument")
    return tail[0]
