"""Core evaluator for tinylisp.

A structurally recursive tree walker. There is no tail-call elimination, so
every nested step is counted against the environment's depth limit and deep
recursion is reported as RecursionLimitExceeded instead of crashing the host.
"""

from __future__ import annotations

from tinylisp.errors import InvalidVarName, RecursionLimitExceeded
from tinylisp.evaluation.apply import apply
from tinylisp.types.boolean import Nil
from tinylisp.types.environment import Environment
from tinylisp.types.expression import Expression, List, Name, Operator, QuotedList


def evaluate(expr: Expression, env: Environment) -> Expression:
    """Reduce `expr` to a terminal value, mutating `env` only through defun."""
    with env.enter():
        try:
            return evaluate0(expr, env)
        except RecursionError:
            raise RecursionLimitExceeded(env.max_depth) from None


def evaluate0(expr: Expression, env: Environment) -> Expression:
    """Single evaluation step; nested expressions go back through evaluate()."""
    match expr:
        case Name(id=name):
            # Variables hold expressions, resolved again on every lookup.
            return evaluate(env.lookup_variable(name), env)
        case Operator():
            raise InvalidVarName()
        case QuotedList(items=items):
            # Quoting suppresses evaluation once: the data comes back as a form.
            return List(items)
        case List(items=()):
            return Nil
        case List(items=(head, *args)):
            return apply(head, args, env, evaluate)

    # --- Atoms return as-is ---
    return expr
