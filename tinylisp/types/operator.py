from __future__ import annotations

from enum import Enum


class OperatorTag(Enum):
    """Builtin operators recognized by the reader.

    The value of each member is the canonical keyword used when rendering.
    """

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    REMAINDER = "%"
    DEFINE_FUNCTION = "defun"
    NTH = "nth"
    LIST = "list"
    EVAL = "eval"
    CAR = "car"
    MAP = "map"

    @property
    def keyword(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
