"""Runtime environment for tinylisp.

The Environment holds the variable and function bindings of one session. It
is passed explicitly to every evaluation call; there is no global state.

Variables are bound to unevaluated expressions and resolved again on every
lookup. Function parameters are bound dynamically: they are visible for the
duration of one application and the previous bindings are restored afterwards,
whether the body succeeded or raised.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from typing import Iterator, Optional, Sequence

from tinylisp import config
from tinylisp.errors import (
    ArgumentNumber,
    RecursionLimitExceeded,
    VoidFunction,
    VoidVariable,
)
from tinylisp.types.expression import Expression
from tinylisp.types.function import FunctionDefinition

_UNBOUND = object()


class Environment:
    """Mutable, single-owner mapping of variables and functions."""

    __slots__ = ("variables", "functions", "max_depth", "depth")

    def __init__(self, max_depth: Optional[int] = None):
        self.variables: dict[str, Expression] = {}
        self.functions: dict[str, FunctionDefinition] = {}
        self.max_depth: int = max_depth if max_depth is not None else config.get_max_depth()
        self.depth: int = 0

    # --- Variables ---
    def lookup_variable(self, name: str) -> Expression:
        """Return the expression bound to `name`.

        Raises VoidVariable if the name is unbound.
        """
        try:
            return self.variables[name]
        except KeyError:
            raise VoidVariable(name) from None

    def define_variable(self, name: str, value: Expression) -> None:
        self.variables[name] = value

    @contextmanager
    def bind_parameters(
        self, names: Sequence[str], values: Sequence[Expression]
    ) -> Iterator[Environment]:
        """Bind `names` to `values` for the body of a `with` block.

        On exit every name gets its previous binding back, or is removed if it
        had none.
        """
        saved = [(name, self.variables.get(name, _UNBOUND)) for name in names]
        for name, value in zip(names, values):
            self.variables[name] = value
        try:
            yield self
        finally:
            for name, previous in reversed(saved):
                if previous is _UNBOUND:
                    self.variables.pop(name, None)
                else:
                    self.variables[name] = previous

    # --- Functions ---
    def define_function(self, fn: FunctionDefinition) -> None:
        """Register `fn`, replacing any function with the same name."""
        self.functions[fn.name] = fn

    def lookup_function(self, name: str, argc: Optional[int] = None) -> FunctionDefinition:
        """Look up a function by name, checking arity when `argc` is given.

        Raises VoidFunction if the name is unknown and ArgumentNumber on an
        arity mismatch.
        """
        fn = self.functions.get(name)
        if fn is None:
            raise VoidFunction(name)
        if argc is not None and argc != fn.arity:
            raise ArgumentNumber(fn.arity, argc)
        return fn

    # --- Depth guard ---
    @contextmanager
    def enter(self) -> Iterator[int]:
        """Account for one level of evaluation nesting."""
        if self.depth >= self.max_depth:
            raise RecursionLimitExceeded(self.max_depth)
        self.depth += 1
        try:
            yield self.depth
        finally:
            self.depth -= 1

    def reset(self) -> None:
        """Drop every binding."""
        self.variables.clear()
        self.functions.clear()
        self.depth = 0

    def _write_bindings(self, buffer: StringIO) -> None:
        from tinylisp.reader.printer import render

        buffer.write("variables: {")
        buffer.write(", ".join(f"{k}: {render(v)}" for k, v in self.variables.items()))
        buffer.write("}, functions: {")
        buffer.write(", ".join(str(fn) for fn in self.functions.values()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_bindings(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_bindings(buffer)
            buffer.write(f" depth={self.depth}/{self.max_depth}>")
            return buffer.getvalue()
