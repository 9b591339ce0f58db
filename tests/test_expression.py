import pytest

from minilisp.errors import LispTypeError
from minilisp.types.environment import Environment
from minilisp.types.expression import Expression, Kind, NIL, TRUE, FALSE, UNIT, boolean


def test_factories_set_kind():
    assert Expression.number(1).kind is Kind.NUMBER
    assert Expression.symbol("a").kind is Kind.SYMBOL
    assert Expression.list().kind is Kind.LIST
    assert Expression.form([Expression.symbol("f")]).kind is Kind.FORM
    assert Expression.primitive(lambda args: UNIT).kind is Kind.PRIMITIVE
    assert Expression.unit() is UNIT


def test_numbers_are_doubles():
    assert Expression.number(3).as_number() == 3.0
    assert isinstance(Expression.number(3).as_number(), float)


@pytest.mark.parametrize(
    "expr, accessor",
    [
        (Expression.symbol("a"), lambda e: e.as_number()),
        (Expression.number(1), lambda e: e.as_symbol()),
        (Expression.number(1), lambda e: e.items),
        (Expression.list(), lambda e: e.func),
        (Expression.list(), lambda e: e.env),
        (Expression.form([Expression.symbol("a")]), lambda e: e.params),
        (UNIT, lambda e: e.items),
    ],
)
def test_wrong_kind_access_fails_fast(expr, accessor):
    with pytest.raises(LispTypeError):
        accessor(expr)


def test_list_and_form_share_payload_but_differ_by_tag():
    items = [Expression.number(1), Expression.number(2)]
    as_list = Expression.list(items)
    as_form = Expression.form(items)
    assert as_list.items == as_form.items
    assert as_list != as_form
    assert Expression.sequence(Kind.LIST, as_form.items) == as_list


def test_sequence_rejects_non_sequence_kind():
    with pytest.raises(LispTypeError):
        Expression.sequence(Kind.NUMBER, [])


def test_closure_holds_three_children_and_env():
    env = Environment()
    lam = Expression.symbol("lambda")
    params = Expression.form([Expression.symbol("x")])
    body = Expression.symbol("x")
    closure = Expression.closure([lam, params, body], env)
    assert closure.env is env
    assert closure.params is params
    assert closure.body is body
    with pytest.raises(LispTypeError):
        Expression.closure([lam, params], env)


def test_structural_equality_and_hashing():
    assert Expression.number(2) == Expression.number(2.0)
    assert Expression.symbol("a") == Expression.symbol("a")
    assert Expression.symbol("a") != Expression.number(1)
    assert Expression.list([Expression.number(1)]) == Expression.list([Expression.number(1)])
    assert len({Expression.symbol("a"), Expression.symbol("a")}) == 1
    assert (Expression.number(1) == 1) is False


def test_callables_compare_by_identity():
    fn = lambda args: UNIT  # noqa: E731
    assert Expression.primitive(fn) != Expression.primitive(fn)
    prim = Expression.primitive(fn)
    assert prim == prim


def test_constants():
    assert NIL.items == ()
    assert TRUE.as_symbol() == "#t"
    assert FALSE.as_symbol() == "#f"
    assert boolean(True) is TRUE
    assert boolean(False) is FALSE


def test_repr_and_str():
    expr = Expression.form([Expression.symbol("f"), Expression.number(1)])
    assert repr(expr) == "Form([Symbol('f'), Number(1.0)])"
    assert str(expr) == "( f 1 )"
    assert repr(UNIT) == "Unit"
