import pytest

from minilisp.builtin.env_builtin import standard_environment
from minilisp.evaluation.evaluator import evaluate
from minilisp.interpreter import Interpreter
from minilisp.printer import render
from minilisp.reader.parser import parse


@pytest.fixture
def env():
    """Fresh root environment with the standard library loaded."""
    return standard_environment()


@pytest.fixture
def lisp(env):
    """Evaluate one line of source in the shared `env` and render the result."""
    def _run(source: str) -> str:
        return render(evaluate(parse(source), env))
    return _run


@pytest.fixture
def interp():
    return Interpreter()
