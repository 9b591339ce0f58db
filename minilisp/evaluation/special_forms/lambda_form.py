import logging

from minilisp import EvaluatorFn
from minilisp.errors import ArityMismatch, LispTypeError
from minilisp.types.environment import Environment
from minilisp.types.expression import Expression

logger = logging.getLogger(__name__)

LAMBDA = Expression.symbol("lambda")


def lambda_form(
    tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> Expression:
    # (lambda (params...) body): exactly one body expression, nothing evaluated here.
    if len(tail) != 2:
        raise ArityMismatch("lambda requires a parameter list and a single body")

    params, body = tail
    if not params.is_sequence:
        raise LispTypeError(f"lambda parameters must be a list, got {params!r}")
    names = [p.as_symbol() for p in params.items]

    logger.debug("closure created: params=(%s)", " ".join(names))
    return Expression.closure((LAMBDA, params, body), env)
