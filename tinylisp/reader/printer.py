"""Canonical text rendering of expressions.

The output of render() parses back to an equal expression for everything the
reader can produce, so `parse(render(parse(s))) == parse(s)`. NaN is the one
exception: it only comes out of evaluation and has no source form.
"""

from __future__ import annotations

import math
from io import StringIO

from tinylisp.reader.strings import escape_string
from tinylisp.types.boolean import Boolean
from tinylisp.types.expression import (
    Expression,
    Float,
    Int,
    List,
    Name,
    Operator,
    QuotedList,
    QuotedString,
)


def _float_text(value: float) -> str:
    # inf has no literal of its own; 1e999 reads back as inf.
    if math.isinf(value):
        return "1e999" if value > 0 else "-1e999"
    return repr(value)


def _write(expr: Expression, buffer: StringIO) -> None:
    match expr:
        case Name(id=name):
            buffer.write(name)
        case QuotedString(value=value):
            buffer.write(escape_string(value))
        case Operator(tag=tag):
            buffer.write(tag.keyword)
        case Int(value=value):
            buffer.write(str(value))
        case Float(value=value):
            buffer.write(_float_text(value))
        case Boolean():
            buffer.write(expr.value)
        case QuotedList(items=items) | List(items=items):
            if isinstance(expr, QuotedList):
                buffer.write("'")
            buffer.write("(")
            for i, item in enumerate(items):
                if i:
                    buffer.write(" ")
                _write(item, buffer)
            buffer.write(")")
        case _:
            raise TypeError(f"Cannot render {expr!r}")


def render(expr: Expression) -> str:
    """Return the canonical source text of `expr`."""
    with StringIO() as buffer:
        _write(expr, buffer)
        return buffer.getvalue()
