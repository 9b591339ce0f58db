"""The Expression tagged union.

Every syntax node produced by the reader and every runtime value produced by
the evaluator is an `Expression`. The `kind` tag decides which payload is
meaningful; the typed accessors raise `LispTypeError` when asked for a payload
the tag does not carry, so a wrong-kind read never silently coerces.

LIST and FORM share the same payload (a tuple of Expressions). The tag is the
only thing telling data ("( 1 2 )") apart from code to apply ("(f 1 2)").
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Callable, Iterable, Optional, TYPE_CHECKING

from minilisp.errors import LispTypeError

if TYPE_CHECKING:
    from minilisp.types.environment import Environment


class Kind(Enum):
    NUMBER = "number"
    SYMBOL = "symbol"
    LIST = "list"
    FORM = "form"
    PRIMITIVE = "primitive"
    CLOSURE = "closure"
    UNIT = "unit"


SEQUENCE_KINDS = frozenset({Kind.LIST, Kind.FORM})

# A primitive receives the already-evaluated arguments and returns one value.
PrimitiveFn = Callable[[tuple["Expression", ...]], "Expression"]


class Expression:
    """A single node/value. Build instances with the factory classmethods."""

    __slots__ = ("kind", "_value", "_env")

    def __init__(self, kind: Kind, value=None, env: Optional[Environment] = None):
        self.kind: Kind = kind
        self._value = value
        self._env: Optional[Environment] = env

    # --- Factories ---
    @classmethod
    def number(cls, value: float) -> Expression:
        return cls(Kind.NUMBER, float(value))

    @classmethod
    def symbol(cls, name: str) -> Expression:
        # Intern to keep symbol comparison cheap
        return cls(Kind.SYMBOL, sys.intern(name))

    @classmethod
    def list(cls, items: Iterable[Expression] = ()) -> Expression:
        return cls(Kind.LIST, tuple(items))

    @classmethod
    def form(cls, items: Iterable[Expression]) -> Expression:
        return cls(Kind.FORM, tuple(items))

    @classmethod
    def sequence(cls, kind: Kind, items: Iterable[Expression]) -> Expression:
        """Build a LIST or FORM, keeping whichever tag the caller already had."""
        if kind not in SEQUENCE_KINDS:
            raise LispTypeError(f"{kind.value} is not a sequence kind")
        return cls(kind, tuple(items))

    @classmethod
    def primitive(cls, fn: PrimitiveFn) -> Expression:
        return cls(Kind.PRIMITIVE, fn)

    @classmethod
    def closure(cls, children: Iterable[Expression], env: Environment) -> Expression:
        """(lambda params body) paired with the environment it was created in."""
        children = tuple(children)
        if len(children) != 3:
            raise LispTypeError(f"closure needs exactly 3 children, got {len(children)}")
        return cls(Kind.CLOSURE, children, env)

    @classmethod
    def unit(cls) -> Expression:
        return UNIT

    # --- Tag checks ---
    def _expect(self, *kinds: Kind) -> None:
        if self.kind not in kinds:
            wanted = " or ".join(k.value for k in kinds)
            raise LispTypeError(f"Expected {wanted}, got {self.kind.value} {self!r}")

    @property
    def is_number(self) -> bool:
        return self.kind is Kind.NUMBER

    @property
    def is_symbol(self) -> bool:
        return self.kind is Kind.SYMBOL

    @property
    def is_sequence(self) -> bool:
        return self.kind in SEQUENCE_KINDS

    # --- Typed accessors ---
    def as_number(self) -> float:
        self._expect(Kind.NUMBER)
        return self._value

    def as_symbol(self) -> str:
        self._expect(Kind.SYMBOL)
        return self._value

    @property
    def items(self) -> tuple[Expression, ...]:
        self._expect(Kind.LIST, Kind.FORM)
        return self._value

    @property
    def func(self) -> PrimitiveFn:
        self._expect(Kind.PRIMITIVE)
        return self._value

    @property
    def children(self) -> tuple[Expression, ...]:
        self._expect(Kind.CLOSURE)
        return self._value

    @property
    def params(self) -> Expression:
        return self.children[1]

    @property
    def body(self) -> Expression:
        return self.children[2]

    @property
    def env(self) -> Environment:
        self._expect(Kind.CLOSURE)
        return self._env

    # --- Dunder protocol ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if self.kind in (Kind.PRIMITIVE, Kind.CLOSURE):
            return self is other
        return self._value == other._value

    def __hash__(self) -> int:
        if self.kind in (Kind.PRIMITIVE, Kind.CLOSURE):
            return id(self)
        return hash((self.kind, self._value))

    def __repr__(self) -> str:
        match self.kind:
            case Kind.NUMBER:
                return f"Number({self._value!r})"
            case Kind.SYMBOL:
                return f"Symbol({self._value!r})"
            case Kind.LIST | Kind.FORM:
                inner = ", ".join(repr(e) for e in self._value)
                return f"{self.kind.name.title()}([{inner}])"
            case Kind.PRIMITIVE:
                return f"Primitive({getattr(self._value, '__name__', '?')})"
            case Kind.CLOSURE:
                return f"Closure({self._value[1]!r})"
        return "Unit"

    def __str__(self) -> str:
        from minilisp.printer import render
        return render(self)


UNIT = Expression(Kind.UNIT)
NIL = Expression.list()
TRUE = Expression.symbol("#t")
FALSE = Expression.symbol("#f")


def boolean(flag: bool) -> Expression:
    return TRUE if flag else FALSE
