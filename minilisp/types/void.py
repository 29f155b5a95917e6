from __future__ import annotations


class VoidType:
    """Result of a binding statement. Dropped from sequential evaluation results."""

    _instance: VoidType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Void"
    def __str__(self): return ""

    def __eq__(self, other):
        return isinstance(other, VoidType)

    def __hash__(self):
        return hash(VoidType)


Void = VoidType()
