"""Head markers for special forms.

`Condition` marks an `if` list; `Keyword` marks a `def` or `lambda` list.
Neither is a value: both only have meaning as the head of a list.
"""

from __future__ import annotations

import sys


class ConditionType:
    _instance: ConditionType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Condition"
    def __str__(self): return "if"

    def __eq__(self, other):
        return isinstance(other, ConditionType)

    def __hash__(self):
        return hash(ConditionType)


Condition = ConditionType()


class Keyword:
    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Keyword) and self.id == other.id

    def __hash__(self) -> int:
        return hash(("keyword", self.id))

    def __repr__(self):
        return f"Keyword({self.id!r})"

    def __str__(self):
        return self.id
