"""Render Expressions back to canonical source text."""

from __future__ import annotations

from minilisp.types.expression import Expression, Kind


def format_number(value: float) -> str:
    # %g: six significant digits, no trailing zeros ("4", "-3.14159", "3.04141e+64")
    return f"{value:g}"


def render(expr: Expression) -> str:
    """Sequences print as "( a b )", the empty one as "( )"; values without
    source syntax (primitives, closures, unit) print as empty text."""
    match expr.kind:
        case Kind.LIST | Kind.FORM:
            return "(" + "".join(f" {render(e)}" for e in expr.items) + " )"
        case Kind.SYMBOL:
            return expr.as_symbol()
        case Kind.NUMBER:
            return format_number(expr.as_number())
    return ""
