"""User-defined function representation for tinylisp."""

from __future__ import annotations

from dataclasses import dataclass

from tinylisp.types.expression import Expression


@dataclass(frozen=True)
class FunctionDefinition:
    """A named parameter list and an unevaluated body.

    There is no captured environment: parameters are bound dynamically in the
    caller's environment for the duration of one application.
    """

    name: str
    parameter_names: tuple[str, ...]
    body: Expression

    @property
    def arity(self) -> int:
        return len(self.parameter_names)

    def __str__(self) -> str:
        from tinylisp.reader.printer import render
        return f"(defun {self.name} ({' '.join(self.parameter_names)}) {render(self.body)})"
