import pytest

from minilisp.errors import ArityMismatch, LispTypeError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 2 2)", "4"),
        ("(+ (* 2 100) (* 1 10))", "210"),
        ("(+ 1 2 3)", "6"),
        ("(- 10 3 2)", "5"),
        ("(- 5)", "5"),
        ("(* 2 3 4)", "24"),
        ("(/ 12 3)", "4"),
        ("(/ 1 3)", "0.333333"),
        ("(/ 100 2 5)", "10"),
        ("(+ 1 2.5 3)", "6.5"),
        ("(+ -1 5 -3)", "1"),
        ("(* -2 3)", "-6"),
        ("(abs -7.5)", "7.5"),
        ("(abs 4)", "4"),
        ("(/ 1 0)", "inf"),
        ("(/ -1 0)", "-inf"),
        ("(/ 0 0)", "nan"),
    ],
)
def test_arithmetic(lisp, source, expected):
    assert lisp(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", "#t"),
        ("(= 1 2)", "#f"),
        ("(< 1 2)", "#t"),
        ("(< 2 1)", "#f"),
        ("(> 6 5)", "#t"),
        ("(<= 2 2)", "#t"),
        ("(<= 3 2)", "#f"),
        ("(>= 2 3)", "#f"),
        ("(>= 3 3)", "#t"),
        ("(not #f)", "#t"),
        ("(not #t)", "#f"),
        ("(not 0)", "#f"),
        ("(not (< 2 1))", "#t"),
    ],
)
def test_comparison_and_not(lisp, source, expected):
    assert lisp(source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(+)", ArityMismatch),
        ("(/)", ArityMismatch),
        ("(< 1)", ArityMismatch),
        ("(= 1 2 3)", ArityMismatch),
        ("(abs)", ArityMismatch),
        ("(abs 1 2)", ArityMismatch),
        ("(not)", ArityMismatch),
        ("(+ 1 (quote a))", LispTypeError),
        ("(* 2 nil)", LispTypeError),
        ("(< 1 (list 2))", LispTypeError),
        ("(abs #t)", LispTypeError),
    ],
)
def test_numeric_errors(lisp, source, error):
    with pytest.raises(error):
        lisp(source)
