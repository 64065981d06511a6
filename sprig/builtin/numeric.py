"""Numeric tower for Sprig: Int ⊂ Float ⊂ Complex.

Binary operations promote to the wider of their operands:

- Int with Int stays Int (wrapping at 32 bits; division truncates toward zero)
- any Float operand makes the result a Float
- any Complex operand makes the result a Complex

Booleans take part in arithmetic as 1 and 0 (see `coerce`). Unresolved
symbols are rejected with an "Unknown symbol" error before any type check.
"""
from __future__ import annotations

import math
import operator
from typing import Callable, Iterable

from sprig.errors import SprigDivisionByZero, SprigEvalError, SprigNameError, SprigTypeError
from sprig.types.value import Value, Bool, Complex, Float, Int, UnresolvedSymbol

_RANKS = {Int: 0, Float: 1, Complex: 2}


def check_symbols(values: Iterable[Value]) -> None:
    """Raise for the first unresolved symbol among `values`."""
    for v in values:
        if isinstance(v, UnresolvedSymbol):
            raise SprigNameError(f"Unknown symbol {v.name}")


def coerce(value: Value, op: str) -> Value:
    """Return `value` as a member of the numeric tower, or raise."""
    match value:
        case Bool(value=b):
            return Int(1 if b else 0)
        case Int() | Float() | Complex():
            return value
        case UnresolvedSymbol(name=name):
            raise SprigNameError(f"Unknown symbol {name}")
    raise SprigTypeError(f"Invalid types for '{op}'")


def to_python(value: Value) -> int | float | complex:
    if isinstance(value, Complex):
        return value.to_python()
    return value.value


def _box(result: int | float | complex, rank: int) -> Value:
    if rank == 0:
        return Int(result)
    if rank == 1:
        return Float(result)
    return Complex.from_python(complex(result))


def _rank(x: Value, y: Value) -> int:
    return max(_RANKS[type(x)], _RANKS[type(y)])


def _binary(x: Value, y: Value, op: Callable) -> Value:
    return _box(op(to_python(x), to_python(y)), _rank(x, y))


def add(x: Value, y: Value) -> Value:
    return _binary(x, y, operator.add)


def sub(x: Value, y: Value) -> Value:
    return _binary(x, y, operator.sub)


def mul(x: Value, y: Value) -> Value:
    return _binary(x, y, operator.mul)


def neg(x: Value) -> Value:
    return _box(-to_python(x), _RANKS[type(x)])


def is_zero(x: Value) -> bool:
    match x:
        case Int(value=0):
            return True
        case Float(value=v):
            return v == 0.0
        case Complex(real=re, imag=im):
            return re == 0.0 and im == 0.0
    return False


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def div(x: Value, y: Value) -> Value:
    if is_zero(y):
        raise SprigDivisionByZero("Invalid division by zero")
    rank = _rank(x, y)
    if rank == 0:
        return Int(trunc_div(x.value, y.value))
    return _box(to_python(x) / to_python(y), rank)


def power(x: Value, y: Value) -> Value:
    """x raised to y: a Float for real operands, a Complex otherwise."""
    if _rank(x, y) == 2:
        try:
            return Complex.from_python(complex(to_python(x)) ** complex(to_python(y)))
        except ZeroDivisionError:
            raise SprigDivisionByZero("Invalid division by zero in 'pow'")
        except OverflowError:
            raise SprigEvalError("Numeric overflow in 'pow'")
    try:
        return Float(math.pow(float(to_python(x)), float(to_python(y))))
    except ValueError:
        raise SprigEvalError(f"Invalid arguments for 'pow': {x} {y}")
    except OverflowError:
        raise SprigEvalError("Numeric overflow in 'pow'")


def compare(x: Value, y: Value, op: Callable[[float, float], bool], name: str) -> Bool:
    """Order two real numbers; Int is promoted to Float when mixed."""
    check_symbols((x, y))
    if not (isinstance(x, (Int, Float)) and isinstance(y, (Int, Float))):
        raise SprigTypeError(f"Invalid types for '{name}'")
    return Bool(bool(op(to_python(x), to_python(y))))
