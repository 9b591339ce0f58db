"""Runtime environment for minilisp.

The Environment stores bindings of symbol names to Expressions and supports
nested scopes via an `outer` link. Closures keep their defining Environment
alive, so the chain forms a DAG that Python's reference counting owns.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from minilisp.errors import LispTypeError, UndefinedSymbol
from minilisp.types.expression import Expression


class Environment:
    """Hierarchical mapping from symbol names to Expressions."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Expression] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: Expression) -> None:
        """Bind `name` to `value` in this frame only; ancestors are untouched.

        Raises LispTypeError if `value` is not an Expression.
        """
        if not isinstance(value, Expression):
            raise LispTypeError(f"Cannot bind {name} to non-expression {value!r}")
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> Expression:
        """Look up the value bound to `name`, searching outward.

        Raises UndefinedSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UndefinedSymbol(f"Symbol '{name}' not defined")
        return env.vars[name]

    def update(self, mapping: Mapping[str, Expression]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
