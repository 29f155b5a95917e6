"""Primitive operator application.

Operands arrive already evaluated, in source order. All operands must share
one type: there is no coercion between integers and floats. Arithmetic folds
left from the first operand; comparisons check every later operand against
the first.
"""

from __future__ import annotations

import math
from typing import Callable

from minilisp import LispValue
from minilisp.errors import MiniLispArityError, MiniLispTypeError, MiniLispTypeMismatch
from minilisp.types.equality import same_value
from minilisp.types.integer import trunc_div, wrap_i64
from minilisp.types.operator import Op


def _float_div(a: float, b: float) -> float:
    # IEEE-754 semantics instead of ZeroDivisionError
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


INT_ARITHMETIC: dict[Op, Callable[[int, int], int]] = {
    Op.ADD: lambda a, b: wrap_i64(a + b),
    Op.SUB: lambda a, b: wrap_i64(a - b),
    Op.MUL: lambda a, b: wrap_i64(a * b),
    # b == 0 raises ZeroDivisionError
    Op.DIV: lambda a, b: wrap_i64(trunc_div(a, b)),
}

FLOAT_ARITHMETIC: dict[Op, Callable[[float, float], float]] = {
    Op.ADD: lambda a, b: a + b,
    Op.SUB: lambda a, b: a - b,
    Op.MUL: lambda a, b: a * b,
    Op.DIV: _float_div,
}

ORDERED_TYPES = (int, float, bool)


def _fold(op: Op, operands: list[LispValue]) -> LispValue:
    first = operands[0]
    tag = type(first)
    if tag is int:
        table = INT_ARITHMETIC
    elif tag is float:
        table = FLOAT_ARITHMETIC
    else:
        raise MiniLispTypeError(f"Operator {op} is not implemented for {tag.__name__}")
    fn = table[op]
    acc = first
    for x in operands[1:]:
        acc = fn(acc, x)
    return acc


def _equal(first: LispValue, rest: list[LispValue]) -> bool:
    res = False
    for x in rest:
        if not same_value(x, first):
            return False
        res = True
    return res


def _not_equal(first: LispValue, rest: list[LispValue]) -> bool:
    # OR-accumulate over every operand; never short-circuits
    res = False
    for x in rest:
        res |= not same_value(x, first)
    return res


def _chain(op: Op, first: LispValue, rest: list[LispValue]) -> bool:
    if rest and type(first) not in ORDERED_TYPES:
        raise MiniLispTypeError(f"Operator {op} is not implemented for {type(first).__name__}")
    res = False
    for x in rest:
        holds = first > x if op is Op.GREATER else first < x
        if not holds:
            return False
        res = True
    return res


def apply_operator(op: Op, operands: list[LispValue]) -> LispValue:
    """Apply `op` to evaluated `operands` (at least one, all of one type)."""
    if not operands:
        raise MiniLispArityError(f"Operator {op} requires at least one operand")

    tag = type(operands[0])
    for x in operands[1:]:
        if type(x) is not tag:
            raise MiniLispTypeMismatch(
                f"Operands are not the same type: {tag.__name__} and {type(x).__name__}"
            )

    if op.is_arithmetic:
        return _fold(op, operands)

    first, rest = operands[0], operands[1:]
    if op is Op.EQ:
        return _equal(first, rest)
    if op is Op.NOT_EQ:
        return _not_equal(first, rest)
    return _chain(op, first, rest)
