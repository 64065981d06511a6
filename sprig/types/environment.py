"""Runtime environment for Sprig.

The Environment stores bindings of symbol names to evaluated values and
supports nested scopes via an `outer` link. Lookup walks outward and resolves
to the innermost scope that binds a name; `set` always writes to the current
scope, so an inner scope can shadow but never rebind an outer binding.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from sprig.errors import SprigInvalidSymbol
from sprig.types.value import Value


class Environment:
    """Hierarchical mapping from symbol names to Sprig values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Value] = {}
        self.outer: Environment | None = outer

    def child(self) -> Environment:
        """Return a fresh scope whose outer link is this environment."""
        return Environment(outer=self)

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: str) -> Optional[Value]:
        """Look up the value bound to `name`, or None if no scope binds it.

        The evaluator turns None into an UnresolvedSymbol value rather than
        raising, so unknown symbols can be carried around as data.
        """
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def set(self, name: str, value: Value) -> None:
        """Bind `name` to `value` in this (innermost) scope.

        Used for both first definition and mutation; outer scopes are never
        touched.
        """
        if not isinstance(name, str) or not name:
            raise SprigInvalidSymbol(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def update(self, mapping: dict[str, Value]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def depth(self) -> int:
        """Number of scopes between this one and the root (root is 0)."""
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
