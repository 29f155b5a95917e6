"""Structural equality that respects value types.

Python's own `==` treats 1, 1.0 and True as equal and lets a list match a
NaN element against itself by identity. Here two values are equal only when
they have the same exact type, lists compare element by element, and floats
use IEEE comparison so NaN never equals anything.
"""

from __future__ import annotations

from minilisp import LispValue


def same_value(a: LispValue, b: LispValue) -> bool:
    if type(a) is not type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(same_value(x, y) for x, y in zip(a, b))
    return a == b
