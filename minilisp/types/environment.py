"""Runtime environment for minilisp.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link: one frame for the session, plus one per
lambda invocation.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from minilisp import LispValue
from minilisp.types.symbol import Symbol


def _as_symbol(name: Symbol | str) -> Symbol:
    return name if isinstance(name, Symbol) else Symbol(name)


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    @classmethod
    def extend(cls, parent: Environment) -> Environment:
        """Create an empty frame whose lookups fall back to `parent`."""
        return cls(outer=parent)

    def get(self, name: Symbol | str) -> Optional[LispValue]:
        """Look up `name` in this frame, then in each enclosing frame.

        Returns None when no frame in the chain binds the name.
        """
        symbol = _as_symbol(name)
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env.vars[symbol]
            env = env.outer
        return None

    def set(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` in this frame only. Enclosing frames are never touched."""
        self.vars[_as_symbol(name)] = value

    def __contains__(self, name: Symbol | str) -> bool:
        return self.get(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Full chain representation for debugging."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
