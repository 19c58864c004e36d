from __future__ import annotations

import math
from typing import Sequence

from tinylisp import EvaluatorFn
from tinylisp.errors import ArgumentNumber, DivBy0, IntOverflow, ShouldBeNum
from tinylisp.types.environment import Environment
from tinylisp.types.expression import (
    INT_MAX,
    INT_MIN,
    Expression,
    Float,
    Int,
    Number,
)


# -------------------------------
# Helpers
# -------------------------------
def args_to_numbers(
    args: Sequence[Expression], env: Environment, evaluate_fn: EvaluatorFn
) -> list[Number]:
    """Evaluate every argument left to right, then require numbers."""
    values = [evaluate_fn(arg, env) for arg in args]
    for value in values:
        if not isinstance(value, Number):
            raise ShouldBeNum()
    return values


def has_float(nums: Sequence[Number]) -> bool:
    return any(isinstance(n, Float) for n in nums)


def checked(value: int) -> int:
    if not INT_MIN <= value <= INT_MAX:
        raise IntOverflow()
    return value


def exactly_two(args: Sequence[Expression]) -> None:
    if len(args) != 2:
        raise ArgumentNumber(2, len(args))


def ieee_div(a: float, b: float) -> float:
    """Float division that follows IEEE 754 instead of raising on zero."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def ieee_fmod(a: float, b: float) -> float:
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: Sequence[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Number:
    nums = args_to_numbers(args, env, evaluate_fn)
    # A single float operand turns the whole operation into float arithmetic.
    if has_float(nums):
        return Float(sum((float(n.value) for n in nums), 0.0))
    total = 0
    for n in nums:
        total = checked(total + n.value)
    return Int(total)


def mul(args: Sequence[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Number:
    nums = args_to_numbers(args, env, evaluate_fn)
    if has_float(nums):
        product = 1.0
        for n in nums:
            product *= float(n.value)
        return Float(product)
    product = 1
    for n in nums:
        product = checked(product * n.value)
    return Int(product)


def sub(args: Sequence[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Number:
    exactly_two(args)
    a, b = args_to_numbers(args, env, evaluate_fn)
    if has_float((a, b)):
        return Float(float(a.value) - float(b.value))
    return Int(checked(a.value - b.value))


def div(args: Sequence[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Number:
    """Integer division truncates toward zero and fails on a zero divisor;
    float division never fails and may produce inf or nan."""
    exactly_two(args)
    a, b = args_to_numbers(args, env, evaluate_fn)
    if has_float((a, b)):
        return Float(ieee_div(float(a.value), float(b.value)))
    if b.value == 0:
        raise DivBy0()
    q = abs(a.value) // abs(b.value)
    if (a.value < 0) != (b.value < 0):
        q = -q
    return Int(checked(q))


def remainder(args: Sequence[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Number:
    """Remainder with the sign of the dividend, as in C."""
    exactly_two(args)
    a, b = args_to_numbers(args, env, evaluate_fn)
    if has_float((a, b)):
        return Float(ieee_fmod(float(a.value), float(b.value)))
    if b.value == 0:
        raise DivBy0()
    if a.value == INT_MIN and b.value == -1:
        raise IntOverflow()
    r = abs(a.value) % abs(b.value)
    return Int(-r if a.value < 0 else r)
