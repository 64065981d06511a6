"""Syntax tree for Sprig.

The parser emits Node objects, which are immutable once built:

    - symbols   -> SymbolNode (interned name)
    - lists     -> ListNode (tuple of children)
    - integers  -> IntNode (32-bit range)
    - floats    -> FloatNode
    - booleans  -> BoolNode (#t / #f)
    - strings   -> StringNode (extended dialect)
    - complex   -> ComplexNode (extended dialect, e.g. 1+2i)

ValueWrapper is never produced by the parser. It carries an already computed
runtime Value in a position that expects a Node: lambda application uses it to
substitute evaluated arguments into a body, and primitives use it to hand a
value back to code that evaluates nodes.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Any, Iterator


def format_float(x: float) -> str:
    """Render a float so that it reads back as a float (3.0, not 3)."""
    return repr(float(x))


def format_complex(real: float, imag: float) -> str:
    sign = "+" if math.copysign(1.0, imag) > 0 or math.isnan(imag) else "-"
    return f"{format_float(real)}{sign}{format_float(abs(imag))}i"


def format_string(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


class Node:
    __slots__ = ()


class SymbolNode(Node):
    __slots__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SymbolNode) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"SymbolNode({self.name!r})"

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class ListNode(Node):
    items: tuple[Node, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __str__(self):
        return "(" + " ".join(str(item) for item in self.items) + ")"


@dataclass(frozen=True)
class IntNode(Node):
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class FloatNode(Node):
    value: float

    def __str__(self):
        return format_float(self.value)


@dataclass(frozen=True)
class ComplexNode(Node):
    real: float
    imag: float

    def __str__(self):
        return format_complex(self.real, self.imag)


@dataclass(frozen=True)
class BoolNode(Node):
    value: bool

    def __str__(self):
        return "#t" if self.value else "#f"


@dataclass(frozen=True)
class StringNode(Node):
    value: str

    def __str__(self):
        return format_string(self.value)


@dataclass(frozen=True)
class ValueWrapper(Node):
    # A sprig.types.value.Value; typed loosely to keep this module import-free
    value: Any

    def __str__(self):
        return str(self.value)
