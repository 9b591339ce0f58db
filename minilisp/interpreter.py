from __future__ import annotations

import sys
from pathlib import Path

from minilisp.config import get_recursion_limit
from minilisp.types.environment import Environment
from minilisp.types.expression import Expression, UNIT
from minilisp.reader.parser import parse, parse_all
from minilisp.evaluation.evaluator import evaluate
from minilisp.builtin.env_builtin import standard_environment
from minilisp.printer import render


class Interpreter:
    """
    One interpreter session: owns the single root Environment, which every
    top-level `define` mutates for the lifetime of the session.
    """

    def __init__(self, prelude: str | None = None):
        _raise_recursion_limit()
        self.env: Environment = standard_environment()
        if prelude:
            self.run(prelude)

    def eval(self, code: str) -> Expression:
        """Evaluate the first expression in `code` (the rest is ignored)."""
        return evaluate(parse(code), self.env)

    def eval_to_string(self, code: str) -> str:
        return render(self.eval(code))

    def run(self, code: str) -> Expression:
        """Evaluate every top-level expression in `code`; return the last result."""
        result: Expression = UNIT
        for expr in parse_all(code):
            result = evaluate(expr, self.env)
        return result

    def load(self, path: str | Path) -> Expression:
        return self.run(Path(path).read_text(encoding="utf-8"))


def _raise_recursion_limit() -> None:
    # Each Lisp call nests several Python frames; MINILISP_RECURSION_LIMIT only ever raises the limit
    limit = get_recursion_limit()
    if limit is not None and limit > sys.getrecursionlimit():
        sys.setrecursionlimit(limit)
