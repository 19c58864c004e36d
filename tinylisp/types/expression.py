"""AST node types.

The reader builds these and the evaluator consumes them. There is no separate
runtime value type: evaluation narrows an Expression down to a terminal shape
(a number, a boolean, a name, or list data).

    - identifiers     -> Name
    - "strings"       -> QuotedString
    - add, +, ...     -> Operator
    - 12, 1_000       -> Int
    - 2.5, 5E-3       -> Float
    - '(a b)          -> QuotedList
    - (a b)           -> List
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from tinylisp.types.boolean import Boolean
from tinylisp.types.operator import OperatorTag

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


@dataclass(frozen=True)
class Name:
    id: str

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class QuotedString:
    value: str


@dataclass(frozen=True)
class Operator:
    tag: OperatorTag

    def __str__(self) -> str:
        return self.tag.keyword


@dataclass(frozen=True)
class Number:
    """Common base of Int and Float."""


@dataclass(frozen=True)
class Int(Number):
    value: int

    def __post_init__(self):
        if not INT_MIN <= self.value <= INT_MAX:
            raise ValueError(f"{self.value} does not fit in a signed 64-bit integer")


@dataclass(frozen=True)
class Float(Number):
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True, init=False)
class _Sequence:
    items: tuple

    def __init__(self, items: Iterable[Expression] = ()):
        object.__setattr__(self, "items", tuple(items))

    @property
    def head(self) -> Expression | None:
        return self.items[0] if self.items else None

    @property
    def tail(self) -> tuple:
        return self.items[1:]


@dataclass(frozen=True, init=False)
class QuotedList(_Sequence):
    """Data that is not evaluated unless explicitly forced with eval."""


@dataclass(frozen=True, init=False)
class List(_Sequence):
    """An evaluable form: element 0 names the function, the rest are arguments."""


Atom = Union[Name, QuotedString, Operator, Number, Boolean]
Expression = Union[Atom, QuotedList, List]


def is_atom(expr: Expression) -> bool:
    return isinstance(expr, (Name, QuotedString, Operator, Number, Boolean))
