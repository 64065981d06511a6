"""Lambda value representation for Sprig."""

from __future__ import annotations

from io import StringIO

from sprig.types.node import Node, SymbolNode
from sprig.types.value import Value


class Lambda(Value):
    """A user-defined procedure: formal parameters and a single body node.

    A Lambda captures no environment. Application binds parameters by
    substituting argument values into the body (see sprig.evaluation.apply).
    """

    __slots__ = ("params", "body")

    def __init__(self, params: tuple[SymbolNode, ...] | list[SymbolNode], body: Node):
        self.params: tuple[SymbolNode, ...] = tuple(params)
        self.body: Node = body

    @property
    def arity(self) -> int:
        return len(self.params)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Lambda)
            and self.params == other.params
            and self.body == other.body
        )

    def __hash__(self) -> int:
        return hash((self.params, self.body))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)
