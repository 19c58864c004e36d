"""Registry of builtin operators.

Maps each OperatorTag to the handler implementing it. Every handler receives
the unevaluated argument expressions, the environment and the evaluator, and
decides for itself what to evaluate. A tag the reader knows but this table
lacks is reported as Unimplemented.
"""

from typing import Callable, Sequence

from tinylisp import EvaluatorFn
from tinylisp.evaluation.builtins import add, div, mul, remainder, sub
from tinylisp.evaluation.special_forms import (
    car_form,
    defun_form,
    eval_form,
    list_form,
    map_form,
    nth_form,
)
from tinylisp.types.environment import Environment
from tinylisp.types.expression import Expression
from tinylisp.types.operator import OperatorTag

OperatorFn = Callable[[Sequence[Expression], Environment, EvaluatorFn], Expression]

OPERATORS: dict[OperatorTag, OperatorFn] = {
    OperatorTag.ADD: add,
    OperatorTag.SUB: sub,
    OperatorTag.MUL: mul,
    OperatorTag.DIV: div,
    OperatorTag.REMAINDER: remainder,
    OperatorTag.DEFINE_FUNCTION: defun_form,
    OperatorTag.NTH: nth_form,
    OperatorTag.LIST: list_form,
    OperatorTag.EVAL: eval_form,
    OperatorTag.CAR: car_form,
    OperatorTag.MAP: map_form,
}
