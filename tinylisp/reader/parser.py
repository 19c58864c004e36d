"""
  tinylisp Reader

A PEG-style recursive descent parser. One production, `expression`, is an
ordered alternation; the first alternative that matches wins and is never
revisited:

    expression ::= operator          add sub mul div defun + * - / % nth list eval car map
                 | string            "..." with escapes
                 | identifier        [A-Za-z_][A-Za-z0-9_]*
                 | integer           [0-9][0-9_]*  not followed by '.', 'e' or 'E'
                 | float             2.5  2.  .5  5E-3
                 | "'" sexpr         -> QuotedList
                 | sexpr             -> List
    sexpr      ::= "(" " "* (expression (" "+ expression)*)? " "* ")"

Order matters:
 - operators are tried before identifiers, so `add` is never a variable name;
 - the integer rule refuses digits followed by '.' or an exponent, so `2.5`
   reaches the float rule instead of splitting into `2` and `.5`;
 - `-` is always the subtraction operator, there are no signed literals:
   `-3` is an error and a negative number is written `(- 0 3)`.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from tinylisp.errors import ParsingError, TrailingGarbage
from tinylisp.reader.strings import read_string
from tinylisp.types.expression import (
    Expression,
    Float,
    Int,
    INT_MAX,
    List,
    Name,
    Operator,
    QuotedList,
    QuotedString,
)
from tinylisp.types.operator import OperatorTag

logger = logging.getLogger(__name__)

# Keyword forms are checked before the single-character symbols they alias.
OPERATOR_ORDER: list[tuple[str, OperatorTag]] = [
    ("add", OperatorTag.ADD),
    ("sub", OperatorTag.SUB),
    ("mul", OperatorTag.MUL),
    ("div", OperatorTag.DIV),
    ("defun", OperatorTag.DEFINE_FUNCTION),
    ("+", OperatorTag.ADD),
    ("*", OperatorTag.MUL),
    ("-", OperatorTag.SUB),
    ("/", OperatorTag.DIV),
    ("%", OperatorTag.REMAINDER),
    ("nth", OperatorTag.NTH),
    ("list", OperatorTag.LIST),
    ("eval", OperatorTag.EVAL),
    ("car", OperatorTag.CAR),
    ("map", OperatorTag.MAP),
]

IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
WORD_CHAR_RE = re.compile(r"[A-Za-z0-9_]")
DIGITS_RE = re.compile(r"[0-9][0-9_]*")
FLOAT_RE = re.compile(r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
SPACES_RE = re.compile(r" *")


def _describe(source: str, pos: int) -> str:
    if pos >= len(source):
        return "end of input"
    return repr(source[pos])


class Reader:
    """Parser state over one source string."""

    def __init__(self, source: str, pos: int = 0):
        self.source = source
        self.pos = pos

    def peek(self) -> Optional[str]:
        return self.source[self.pos] if self.pos < len(self.source) else None

    def error(self, expected: str) -> ParsingError:
        return ParsingError(
            f"expected {expected} at position {self.pos}, found {_describe(self.source, self.pos)}"
        )

    # ------------------------
    # Alternatives, in order
    # ------------------------
    def operator(self) -> Optional[Operator]:
        for token, tag in OPERATOR_ORDER:
            if not self.source.startswith(token, self.pos):
                continue
            end = self.pos + len(token)
            # alphabetic keywords only match as whole words
            if token.isalpha() and WORD_CHAR_RE.match(self.source, end):
                continue
            self.pos = end
            return Operator(tag)
        return None

    def string(self) -> Optional[QuotedString]:
        if self.peek() != '"':
            return None
        value, self.pos = read_string(self.source, self.pos)
        return QuotedString(value)

    def identifier(self) -> Optional[Name]:
        m = IDENTIFIER_RE.match(self.source, self.pos)
        if not m:
            return None
        self.pos = m.end()
        return Name(m.group())

    def integer(self) -> Optional[Int]:
        m = DIGITS_RE.match(self.source, self.pos)
        if not m:
            return None
        end = m.end()
        if end < len(self.source) and self.source[end] in ".eE":
            return None
        digits = m.group().replace("_", "").lstrip("0") or "0"
        # Too wide for 64 bits: let the float rule have it.
        if len(digits) > len(str(INT_MAX)):
            return None
        value = int(digits)
        if value > INT_MAX:
            return None
        self.pos = end
        return Int(value)

    def floating(self) -> Optional[Float]:
        m = FLOAT_RE.match(self.source, self.pos)
        if not m:
            return None
        self.pos = m.end()
        return Float(float(m.group()))

    def quoted_list(self) -> Optional[QuotedList]:
        if self.peek() != "'":
            return None
        self.pos += 1
        if self.peek() != "(":
            raise self.error("'(' after quote")
        return QuotedList(self.sexpr())

    def plain_list(self) -> Optional[List]:
        if self.peek() != "(":
            return None
        return List(self.sexpr())

    def sexpr(self) -> list[Expression]:
        """Parse "(" elements ")" and return the elements."""
        self.pos += 1  # consume (
        self.spaces()
        items: list[Expression] = []
        if self.peek() == ")":
            self.pos += 1
            return items
        while True:
            items.append(self.parse_expr())
            separated = self.spaces()
            if self.peek() == ")":
                self.pos += 1
                return items
            if not separated:
                raise self.error("' ' or ')'")

    def spaces(self) -> int:
        m = SPACES_RE.match(self.source, self.pos)
        self.pos = m.end()
        return len(m.group())

    def parse_expr(self) -> Expression:
        for alternative in (
            self.operator,
            self.string,
            self.identifier,
            self.integer,
            self.floating,
            self.quoted_list,
            self.plain_list,
        ):
            expr = alternative()
            if expr is not None:
                return expr
        raise self.error("an expression")


def parse(source: str) -> Expression:
    """Parse exactly one expression from `source`.

    Surrounding whitespace is ignored. Raises ParsingError when the grammar
    does not match and TrailingGarbage when input is left over after a
    complete expression.
    """
    reader = Reader(source)
    while reader.peek() is not None and reader.peek().isspace():
        reader.pos += 1
    try:
        expr = reader.parse_expr()
    except RecursionError:
        raise ParsingError("expression nested too deeply") from None
    rest = source[reader.pos:]
    if rest.strip():
        logger.debug("trailing input after expression: %r", rest)
        raise TrailingGarbage(rest)
    return expr
