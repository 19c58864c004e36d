from typing import Sequence

from tinylisp import EvaluatorFn
from tinylisp.errors import ArgumentNumber
from tinylisp.types.environment import Environment
from tinylisp.types.expression import Expression


def eval_form(
    args: Sequence[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    if len(args) != 1:
        raise ArgumentNumber(1, len(args))
    # The first pass turns '(...) into (...); the second pass runs it.
    intermediate = evaluate_fn(args[0], env)
    return evaluate_fn(intermediate, env)
