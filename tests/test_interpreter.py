import sys

import pytest

from minilisp import Interpreter, evaluate, parse, render, standard_environment
from minilisp.errors import EmptyListAccess, LispTypeError, UndefinedSymbol
from minilisp.types.expression import UNIT


def test_public_api_pipeline():
    env = standard_environment()
    assert render(evaluate(parse("(+ 2 2)"), env)) == "4"


def test_standard_environments_are_independent():
    first = standard_environment()
    second = standard_environment()
    evaluate(parse("(define only-here 1)"), first)
    assert "only-here" in first
    assert "only-here" not in second


def test_eval_reads_only_first_expression(interp):
    assert interp.eval_to_string("(define a 1) (define b 2)") == ""
    assert "a" in interp.env
    assert "b" not in interp.env


def test_run_evaluates_every_expression(interp):
    result = interp.run("(define a 1)\n(define b (+ a 1))\n(* b 10)")
    assert render(result) == "20"
    assert interp.run("") is UNIT


def test_prelude(interp):
    session = Interpreter(prelude="(define square (lambda (x) (* x x)))")
    assert session.eval_to_string("(square 7)") == "49"


def test_load(tmp_path, interp):
    source = tmp_path / "prog.lisp"
    source.write_text("(define x 4)\n(define y (* x x))\n", encoding="utf-8")
    interp.load(source)
    assert interp.eval_to_string("y") == "16"


def test_undefined_symbol_never_defaults(interp):
    with pytest.raises(UndefinedSymbol):
        interp.eval("foo")


def test_failed_define_keeps_previous_binding(interp):
    interp.eval("(define y 1)")
    with pytest.raises(EmptyListAccess):
        interp.eval("(define y (car nil))")
    assert interp.eval_to_string("y") == "1"


def test_type_error_kind_from_evaluation(interp):
    with pytest.raises(LispTypeError) as exc:
        interp.eval("(+ 1 (quote a))")
    assert exc.value.kind == "TypeMismatch"


def test_session_raises_recursion_limit_from_env(monkeypatch):
    original = sys.getrecursionlimit()
    monkeypatch.setenv("MINILISP_RECURSION_LIMIT", str(original + 5000))
    try:
        session = Interpreter()
        assert sys.getrecursionlimit() == original + 5000
        session.eval("(define fact (lambda (n) (if (<= n 1) 1 (* n (fact (- n 1))))))")
        assert session.eval_to_string("(fact 150)") == "5.71338e+262"
    finally:
        sys.setrecursionlimit(original)


def test_session_never_lowers_recursion_limit(monkeypatch):
    original = sys.getrecursionlimit()
    monkeypatch.setenv("MINILISP_RECURSION_LIMIT", "50")
    Interpreter()
    assert sys.getrecursionlimit() == original
