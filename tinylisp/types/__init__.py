from tinylisp.types.boolean import Boolean, Nil, T
from tinylisp.types.operator import OperatorTag
from tinylisp.types.expression import (
    Atom,
    Expression,
    Float,
    Int,
    List,
    Name,
    Number,
    Operator,
    QuotedList,
    QuotedString,
    is_atom,
)
from tinylisp.types.function import FunctionDefinition
from tinylisp.types.environment import Environment

__all__ = [
    "Atom",
    "Boolean",
    "Environment",
    "Expression",
    "Float",
    "FunctionDefinition",
    "Int",
    "List",
    "Name",
    "Nil",
    "Number",
    "Operator",
    "OperatorTag",
    "QuotedList",
    "QuotedString",
    "T",
    "is_atom",
]
