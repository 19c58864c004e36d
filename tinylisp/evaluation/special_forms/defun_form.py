import logging
from typing import Sequence

from tinylisp import EvaluatorFn
from tinylisp.errors import ArgumentNumber, InvalidArguments, InvalidSyntax
from tinylisp.reader.printer import render
from tinylisp.types.environment import Environment
from tinylisp.types.expression import Expression, List, Name
from tinylisp.types.function import FunctionDefinition

logger = logging.getLogger(__name__)


def defun_form(
    args: Sequence[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (defun name (param ...) (body ...))
    Nothing is evaluated: the parameter list and the body are stored verbatim.
    Redefining a name replaces the previous definition.
    """
    if len(args) != 3:
        raise ArgumentNumber(3, len(args))

    name, params, body = args
    if not isinstance(name, Name) or not isinstance(params, List) or not isinstance(body, List):
        raise InvalidSyntax()
    if not all(isinstance(p, Name) for p in params.items):
        raise InvalidArguments(render(params))

    fn = FunctionDefinition(name.id, tuple(p.id for p in params.items), body)
    if name.id in env.functions:
        logger.debug("redefining function %s", name.id)
    env.define_function(fn)
    logger.debug("defined %s", fn)
    return Name(name.id)
