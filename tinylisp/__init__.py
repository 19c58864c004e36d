# Core type aliases and public API for tinylisp.
#
# Source text is parsed into an Expression tree (tinylisp.types) which the
# evaluator reduces against an Environment. Parsing and evaluation are the only
# two operations a driver needs:
#
#     expr = parse("(add 1 2)")
#     value = evaluate(expr, Environment())
#
# There is no separate runtime value type: a Value is an Expression narrowed to
# a terminal shape.

from typing import Any, Callable

# Evaluator function type: passed into builtins so they can evaluate their arguments
EvaluatorFn = Callable[..., Any]

from tinylisp.errors import EvalError, LispSyntaxError, TinyLispError  # noqa: E402
from tinylisp.types import Environment, Expression  # noqa: E402
from tinylisp.reader import parse, render  # noqa: E402
from tinylisp.evaluation import evaluate  # noqa: E402
from tinylisp.interpreter import Interpreter  # noqa: E402

Value = Expression

__version__ = "0.1.0"

__all__ = [
    "Environment",
    "EvalError",
    "EvaluatorFn",
    "Expression",
    "Interpreter",
    "LispSyntaxError",
    "TinyLispError",
    "Value",
    "evaluate",
    "parse",
    "render",
]
