from __future__ import annotations

from enum import Enum


class Op(Enum):
    """The eight primitive operators, valued by their surface symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EQ = "=="
    NOT_EQ = "!="
    GREATER = ">"
    SMALLER = "<"

    @property
    def is_arithmetic(self) -> bool:
        return self in (Op.ADD, Op.SUB, Op.MUL, Op.DIV)

    def __str__(self):
        return self.value
