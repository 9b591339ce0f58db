import logging

from minilisp import EvaluatorFn
from minilisp.errors import ArityMismatch
from minilisp.types.environment import Environment
from minilisp.types.expression import Expression, UNIT

logger = logging.getLogger(__name__)


def define_form(
    tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> Expression:
    """
    (define name value)
    The binding lands in `env` itself, and only after `value` evaluated cleanly.
    """
    if len(tail) != 2:
        raise ArityMismatch("define requires exactly 2 arguments")

    target, val_expr = tail
    name = target.as_symbol()
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    logger.debug("defined %s as %s", name, value.kind.value)
    return UNIT
