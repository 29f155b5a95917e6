"""Lambda value: positional parameter names and an unevaluated body list."""

from __future__ import annotations

from minilisp import SExpression
from minilisp.types.equality import same_value
from minilisp.types.symbol import Symbol


class Lambda:
    """A first-class lambda with formal parameters and a body.

    No environment is captured: application runs the body in a frame whose
    parent is the call-site environment.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: list[Symbol], body: list[SExpression]):
        self.params: list[Symbol] = list(params)
        self.body: list[SExpression] = list(body)

    @property
    def arity(self) -> int:
        return len(self.params)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Lambda)
            and same_value(self.params, other.params)
            and same_value(self.body, other.body)
        )

    __hash__ = None  # mutable body

    def __str__(self) -> str:
        from minilisp.printer import to_source
        return to_source(self)

    def __repr__(self) -> str:
        return f"Lambda({self.params!r}, {self.body!r})"
