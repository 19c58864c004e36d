"""List primitives: list, car and nth.

Quoted data passes through these untouched. `list` evaluates its arguments
and quotes the result; `car` refuses a literal quoted list, only accepting
lists produced by evaluation.
"""

from typing import Sequence

from tinylisp import EvaluatorFn
from tinylisp.errors import (
    ArgumentNumber,
    IndexOutOfRange,
    InvalidArguments,
    ShouldBeNum,
    WrongTypeArgumentList,
)
from tinylisp.reader.printer import render
from tinylisp.types.boolean import Nil
from tinylisp.types.environment import Environment
from tinylisp.types.expression import Expression, Int, List, Number, QuotedList


def list_items(
    arg: Expression, env: Environment, evaluate_fn: EvaluatorFn
) -> tuple:
    """Return the elements of a list argument.

    A literal quoted list gives its items verbatim; anything else is evaluated
    and must produce a list.
    """
    if isinstance(arg, QuotedList):
        return arg.items
    value = evaluate_fn(arg, env)
    if isinstance(value, (List, QuotedList)):
        return value.items
    raise WrongTypeArgumentList()


def list_form(
    args: Sequence[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> QuotedList:
    return QuotedList(evaluate_fn(arg, env) for arg in args)


def car_form(
    args: Sequence[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    if len(args) != 1:
        raise ArgumentNumber(1, len(args))
    if isinstance(args[0], QuotedList):
        raise WrongTypeArgumentList()
    value = evaluate_fn(args[0], env)
    if not isinstance(value, (List, QuotedList)):
        raise WrongTypeArgumentList()
    return value.head if value.items else Nil


def nth_form(
    args: Sequence[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (nth index list)
    Zero-based; the element is returned as stored, without evaluating it.
    """
    if len(args) != 2:
        raise ArgumentNumber(2, len(args))
    index = evaluate_fn(args[0], env)
    if not isinstance(index, Number):
        raise ShouldBeNum()
    if not isinstance(index, Int):
        raise InvalidArguments(render(index))
    items = list_items(args[1], env, evaluate_fn)
    if not 0 <= index.value < len(items):
        raise IndexOutOfRange(index.value, len(items))
    return items[index.value]
