"""Runtime values for Sprig.

Every evaluation step produces a Value. Values are immutable, so they can be
shared freely between environments, lists and substituted lambda bodies.

Two variants exist for the evaluator's own bookkeeping rather than for user
data:

- UnresolvedSymbol: an identifier that did not resolve. It is returned rather
  than raised so symbols can flow through `list` as data; numeric and
  comparison primitives reject it with an "Unknown symbol" error.
- NodeWrapper: the deferred-evaluation marker ("thunk"). A reduction step
  returns it to say "not finished, continue with this node"; only the
  trampoline in sprig.evaluation.evaluator consumes it.

The Lambda variant lives in sprig.types.lambda_fn.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from sprig.types.node import Node, format_complex, format_float, format_string


INT_BITS = 32
INT_MIN = -(2 ** (INT_BITS - 1))
INT_MAX = 2 ** (INT_BITS - 1) - 1


def wrap_int(n: int) -> int:
    """Wrap an arbitrary Python int into the signed 32-bit range."""
    return ((int(n) - INT_MIN) % (2 ** INT_BITS)) + INT_MIN


class Value:
    __slots__ = ()


@dataclass(frozen=True)
class Int(Value):
    value: int

    def __post_init__(self):
        object.__setattr__(self, "value", wrap_int(self.value))

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Float(Value):
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def __str__(self):
        return format_float(self.value)


@dataclass(frozen=True)
class Complex(Value):
    real: float
    imag: float

    def __post_init__(self):
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imag", float(self.imag))

    @classmethod
    def from_python(cls, z: complex) -> Complex:
        return cls(z.real, z.imag)

    def to_python(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self):
        return format_complex(self.real, self.imag)


@dataclass(frozen=True)
class Bool(Value):
    value: bool

    def __str__(self):
        return "#t" if self.value else "#f"


@dataclass(frozen=True)
class UnresolvedSymbol(Value):
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Literal(Value):
    text: str

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class String(Value):
    text: str

    def __str__(self):
        return format_string(self.text)


@dataclass(frozen=True)
class List(Value):
    items: tuple[Value, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __str__(self):
        return "(" + " ".join(str(item) for item in self.items) + ")"


@dataclass(frozen=True)
class Function(Value):
    """A primitive registered in the base environment.

    `fn` receives the unevaluated argument nodes, the calling environment and
    the evaluator function (see sprig.PrimitiveFn).
    """
    name: str
    fn: Any

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class NodeWrapper(Value):
    node: Node

    def __str__(self):
        return str(self.node)


class VoidType(Value):
    """Result of side-effecting forms such as define and set!."""
    __slots__ = ()

    def __repr__(self):
        return "Void"

    def __str__(self):
        return "()"

    def __eq__(self, other):
        return isinstance(other, VoidType)

    def __hash__(self):
        return hash(VoidType)


Void = VoidType()

NUMERIC_TYPES = (Int, Float, Complex)
