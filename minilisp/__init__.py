# Core type aliases and public API for minilisp.
#
# Every syntax node and runtime value is a minilisp.types.Expression; the
# aliases below only name the callable shapes that pass through the evaluator.

from typing import Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from minilisp.types.expression import Expression
    from minilisp.types.environment import Environment

# Evaluator function type: handed to special forms and the application engine
EvaluatorFn = Callable[["Expression", "Environment"], "Expression"]

from minilisp.reader.parser import tokenize, read, parse, parse_all  # noqa: E402
from minilisp.evaluation.evaluator import evaluate  # noqa: E402
from minilisp.builtin.env_builtin import standard_environment  # noqa: E402
from minilisp.printer import render  # noqa: E402
from minilisp.interpreter import Interpreter  # noqa: E402

__all__ = [
    "EvaluatorFn",
    "tokenize",
    "read",
    "parse",
    "parse_all",
    "evaluate",
    "standard_environment",
    "render",
    "Interpreter",
]
