"""Application engine for tinylisp.

Everything in function position goes through apply():
- a Name calls the user-defined function of that name, binding each parameter
  to its unevaluated argument expression for the duration of the body;
- an Operator dispatches to its builtin handler;
- anything else cannot be applied.
"""

import logging
from typing import Sequence

from tinylisp import EvaluatorFn
from tinylisp.errors import InvalidFunction, Unimplemented
from tinylisp.evaluation.operators import OPERATORS
from tinylisp.reader.printer import render
from tinylisp.types.environment import Environment
from tinylisp.types.expression import Expression, Name, Operator

logger = logging.getLogger(__name__)


def apply_function(
    name: str,
    args: Sequence[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """Apply the user function `name`.

    Parameters are bound dynamically in `env` and the bindings that were in
    place before the call are restored afterwards, even when the body raises.
    """
    fn = env.lookup_function(name, len(args))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "apply %s(%s) at depth %d",
            name,
            ", ".join(f"{p}={render(a)}" for p, a in zip(fn.parameter_names, args)),
            env.depth,
        )
    with env.bind_parameters(fn.parameter_names, args):
        return evaluate_fn(fn.body, env)


def apply(
    head: Expression,
    args: Sequence[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    if isinstance(head, Name):
        return apply_function(head.id, args, env, evaluate_fn)
    if isinstance(head, Operator):
        handler = OPERATORS.get(head.tag)
        if handler is None:
            raise Unimplemented(head.tag.keyword)
        return handler(args, env, evaluate_fn)
    raise InvalidFunction(render(head))
