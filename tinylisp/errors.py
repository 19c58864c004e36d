"""Exception hierarchy for tinylisp.

Two disjoint families hang off TinyLispError: LispSyntaxError for the reader
and EvalError for the evaluator. Neither is ever converted into the other.
"""

from __future__ import annotations


class TinyLispError(Exception):
    """ Base class for all tinylisp errors"""
    pass


# -------------------------------
# Reader errors
# -------------------------------
class LispSyntaxError(TinyLispError):
    """ Raised when source text is not a valid expression"""


class ParsingError(LispSyntaxError):
    """ Raised when the grammar does not match at some position"""

    def __init__(self, message: str):
        super().__init__(f"Invalid syntax: {message}")
        self.message = message


class TrailingGarbage(LispSyntaxError):
    """ Raised when a complete expression is followed by more input"""

    def __init__(self, rest: str = ""):
        super().__init__("Trailing garbage following expression")
        self.rest = rest


# -------------------------------
# Evaluation errors
# -------------------------------
class EvalError(TinyLispError):
    """ Base class for errors raised while evaluating an expression"""


class ArgumentNumber(EvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, expected: int, got: int):
        super().__init__(f"Wrong number of arguments, expected {expected}, got {got}")
        self.expected = expected
        self.got = got


class InvalidArguments(EvalError):
    """ Raised when a form gets arguments of the right number but wrong shape"""

    def __init__(self, args: str):
        super().__init__(f"Invalid arguments for function: {args}")
        self.args_text = args


class VoidFunction(EvalError):
    """ Raised when a function is called before it is defined"""

    def __init__(self, name: str):
        super().__init__(f"Function `{name}` not found")
        self.name = name


class VoidVariable(EvalError):
    """ Raised when a variable is used while it is unbound"""

    def __init__(self, name: str):
        super().__init__(f"Variable `{name}` not found")
        self.name = name


class ShouldBeNum(EvalError):
    """ Raised when an arithmetic argument does not evaluate to a number"""

    def __init__(self):
        super().__init__("Argument should be number")


class InvalidVarName(EvalError):
    """ Raised when an operator is used where a value is expected"""

    def __init__(self):
        super().__init__("Invalid variable name")


class Unimplemented(EvalError):
    """ Raised for an operator the reader knows but the evaluator does not"""

    def __init__(self, name: str):
        super().__init__(f"Built-in `{name}` not implemented")
        self.name = name


class InvalidFunction(EvalError):
    """ Raised when the head of a form is neither a name nor an operator"""

    def __init__(self, expression: str):
        super().__init__(f"Invalid function `{expression}`")
        self.expression = expression


class IntOverflow(EvalError):
    """ Raised when integer arithmetic leaves the signed 64-bit range"""

    def __init__(self):
        super().__init__("Integer overflow")


class DivBy0(EvalError):
    """ Raised when an integer is divided by zero"""

    def __init__(self):
        super().__init__("Division by 0")


class InvalidSyntax(EvalError):
    """ Raised when a special form is given a malformed shape"""

    def __init__(self):
        super().__init__("Invalid syntax")


class WrongTypeArgumentList(EvalError):
    """ Raised when a list primitive is given something other than a list"""

    def __init__(self):
        super().__init__("Wrong type argument, expected list")


class IndexOutOfRange(EvalError):
    """ Raised when nth is given an index outside the list"""

    def __init__(self, index: int, length: int):
        super().__init__(f"Index {index} out of range for list of length {length}")
        self.index = index
        self.length = length


class RecursionLimitExceeded(EvalError):
    """ Raised when evaluation nests deeper than the environment allows"""

    def __init__(self, limit: int):
        super().__init__(f"Maximum evaluation depth of {limit} exceeded")
        self.limit = limit
