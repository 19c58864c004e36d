"""Builtins that control how their arguments are evaluated.

defun stores its arguments untouched, eval evaluates twice, and the list
primitives distinguish literal quoted data from evaluated results.
"""

from tinylisp.evaluation.special_forms.defun_form import defun_form
from tinylisp.evaluation.special_forms.eval_form import eval_form
from tinylisp.evaluation.special_forms.list_forms import car_form, list_form, nth_form
from tinylisp.evaluation.special_forms.map_form import map_form

__all__ = [
    "car_form",
    "defun_form",
    "eval_form",
    "list_form",
    "map_form",
    "nth_form",
]
