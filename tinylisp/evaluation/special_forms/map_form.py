from typing import Sequence

from tinylisp import EvaluatorFn
from tinylisp.errors import ArgumentNumber, InvalidFunction
from tinylisp.evaluation.special_forms.list_forms import list_items
from tinylisp.reader.printer import render
from tinylisp.types.environment import Environment
from tinylisp.types.expression import Expression, List, Name, Operator, QuotedList


def map_form(
    args: Sequence[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> List:
    """
    (map fn list)
    `fn` is a function name or an operator and is not evaluated. An element
    that is itself a quoted list supplies the whole argument list; any other
    element is passed as the single argument. Every call goes through ordinary
    application, and the first failure aborts the map.
    """
    if len(args) != 2:
        raise ArgumentNumber(2, len(args))
    fn, seq = args
    if not isinstance(fn, (Name, Operator)):
        raise InvalidFunction(render(fn))

    results = []
    for item in list_items(seq, env, evaluate_fn):
        call_args = item.items if isinstance(item, QuotedList) else (item,)
        results.append(evaluate_fn(List((fn, *call_args)), env))
    return List(results)
