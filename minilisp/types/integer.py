"""Signed 64-bit integer semantics on top of Python's unbounded int."""

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1
_SPAN = 2 ** 64


def wrap_i64(n: int) -> int:
    """Wrap `n` into the signed 64-bit range (two's complement)."""
    if I64_MIN <= n <= I64_MAX:
        return n
    return (n - I64_MIN) % _SPAN + I64_MIN


def trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero. `b == 0` raises ZeroDivisionError."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q
