from __future__ import annotations

from enum import Enum


class Boolean(Enum):
    T = "t"
    NIL = "nil"

    def __bool__(self) -> bool:
        return self is Boolean.T

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


Nil = Boolean.NIL
T = Boolean.T
