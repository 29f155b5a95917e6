"""Render minilisp values back into surface syntax."""

from __future__ import annotations

import math
from decimal import Decimal
from io import StringIO

from minilisp import LispValue
from minilisp.types.lambda_fn import Lambda
from minilisp.types.void import VoidType


def _float_source(value: float) -> str:
    # positional notation so the lexer can read it back; inf and nan have no
    # literal and print as Python does
    if not math.isfinite(value):
        return repr(value)
    text = format(Decimal(repr(value)), "f")
    return text if "." in text else text + ".0"


def _write(value: LispValue, buffer: StringIO) -> None:
    if isinstance(value, bool):
        buffer.write("#t" if value else "#f")
    elif isinstance(value, float):
        buffer.write(_float_source(value))
    elif isinstance(value, list):
        buffer.write("(")
        for i, item in enumerate(value):
            if i:
                buffer.write(" ")
            _write(item, buffer)
        buffer.write(")")
    elif isinstance(value, Lambda):
        buffer.write("(lambda (")
        buffer.write(" ".join(str(p) for p in value.params))
        buffer.write(") ")
        _write(value.body, buffer)
        buffer.write(")")
    elif isinstance(value, VoidType):
        pass
    else:
        # int, Symbol, Op, Keyword, Condition all print as their source text
        buffer.write(str(value))


def to_source(value: LispValue) -> str:
    """Return the surface-syntax text for `value` (empty for Void).

    Infinite and NaN floats have no literal syntax and render as `inf`,
    `-inf` and `nan`.
    """
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
