"""Built-in functions for the Sprig runtime environment.

This module defines core arithmetic, comparison, logic, list processing and
math primitives, plus the registration helper that installs them (and the
special forms) into a base environment.

Every primitive has the same shape as a special form: it receives its
argument nodes unevaluated, the calling environment, and the evaluator, and
evaluates the arguments it needs itself.
"""
from __future__ import annotations

import math
import operator
from typing import Callable

from sprig import EvaluatorFn, PrimitiveFn
from sprig.builtin import numeric
from sprig.errors import SprigArityError, SprigEvalError, SprigNameError, SprigTypeError
from sprig.evaluation.apply import invoke_lambda
from sprig.evaluation.evaluator import evaluate0, force
from sprig.evaluation.special_forms import SPECIAL_FORMS
from sprig.types.environment import Environment
from sprig.types.lambda_fn import Lambda
from sprig.types.node import Node, ValueWrapper
from sprig.types.value import (
    Value,
    Bool,
    Float,
    Function,
    Int,
    List,
    Literal,
    NUMERIC_TYPES,
    String,
    UnresolvedSymbol,
)


def _arity(tail: list[Node], n: int, name: str) -> None:
    if len(tail) != n:
        plural = "argument" if n == 1 else "arguments"
        words = {1: "one", 2: "two"}
        raise SprigArityError(f"'{name}' takes exactly {words.get(n, n)} {plural}")


def _eval_args(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> list[Value]:
    return [evaluate_fn(node, env) for node in tail]


def _numeric_args(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn, name: str) -> list[Value]:
    args = _eval_args(tail, env, evaluate_fn)
    numeric.check_symbols(args)
    return [numeric.coerce(a, name) for a in args]


def _expect_list(value: Value, name: str) -> List:
    if isinstance(value, List):
        return value
    if isinstance(value, UnresolvedSymbol):
        raise SprigNameError(f"Unknown symbol {value.name}")
    raise SprigTypeError(f"Invalid type for '{name}'")


# -------------------------------
# Arithmetic
# -------------------------------
def add(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Variadic sum, folded from the right: (+ a b c) is a + (b + (c + 0))."""
    result: Value = Int(0)
    for x in reversed(_numeric_args(tail, env, evaluate_fn, "+")):
        result = numeric.add(x, result)
    return result


def sub(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not tail:
        return Int(0)
    args = _numeric_args(tail, env, evaluate_fn, "-")
    if len(args) == 1:
        return numeric.neg(args[0])
    result = args[0]
    for x in args[1:]:
        result = numeric.sub(result, x)
    return result


def mul(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Variadic product, folded from the right like +."""
    result: Value = Int(1)
    for x in reversed(_numeric_args(tail, env, evaluate_fn, "*")):
        result = numeric.mul(x, result)
    return result


def div(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Divide left-to-right; with one arg returns the reciprocal. Int/Int truncates."""
    if not tail:
        raise SprigArityError("'/' requires at least one argument")
    args = _numeric_args(tail, env, evaluate_fn, "/")
    if len(args) == 1:
        return numeric.div(Int(1), args[0])
    result = args[0]
    for x in args[1:]:
        result = numeric.div(result, x)
    return result


def pow_builtin(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(pow x y) / (expt x y): always a Float, or a Complex for complex operands."""
    _arity(tail, 2, "expt")
    x, y = _numeric_args(tail, env, evaluate_fn, "pow")
    return numeric.power(x, y)


# -------------------------------
# Comparison
# -------------------------------
def _compare(tail, env, evaluate_fn, name: str, op: Callable[[float, float], bool]) -> Bool:
    _arity(tail, 2, name)
    x, y = _eval_args(tail, env, evaluate_fn)
    return numeric.compare(x, y, op, name)


def gt(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Bool:
    return _compare(tail, env, evaluate_fn, ">", operator.gt)


def gte(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Bool:
    return _compare(tail, env, evaluate_fn, ">=", operator.ge)


def lt(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Bool:
    return _compare(tail, env, evaluate_fn, "<", operator.lt)


def lte(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Bool:
    return _compare(tail, env, evaluate_fn, "<=", operator.le)


def is_equal(a: Value, b: Value) -> bool | None:
    """Equality for Sprig values; None when the two kinds are not comparable.

    Numbers compare across the tower, literals/strings/booleans by content,
    and lists element-wise (incomparable elements count as unequal).
    """
    if isinstance(a, NUMERIC_TYPES) and isinstance(b, NUMERIC_TYPES):
        return numeric.to_python(a) == numeric.to_python(b)
    if type(a) is type(b) and isinstance(a, (Literal, String, Bool)):
        return a == b
    if isinstance(a, List) and isinstance(b, List):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) is True for x, y in zip(a, b))
    return None


def equals(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Bool:
    """(= a b) / (equal? a b)"""
    _arity(tail, 2, "=")
    x, y = _eval_args(tail, env, evaluate_fn)
    numeric.check_symbols((x, y))
    result = is_equal(x, y)
    if result is None:
        raise SprigTypeError("Invalid types for '='")
    return Bool(result)


def logical_not(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Bool:
    """Logical NOT; the argument must be a boolean."""
    _arity(tail, 1, "not")
    val = evaluate_fn(tail[0], env)
    if not isinstance(val, Bool):
        raise SprigTypeError("Invalid type for 'not'")
    return Bool(not val.value)


# -------------------------------
# Lists
# -------------------------------
def list_builtin(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> List:
    """Construct a list from the evaluated arguments."""
    return List(tuple(_eval_args(tail, env, evaluate_fn)))


def car(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Return the first element of a non-empty list."""
    _arity(tail, 1, "car")
    xs = _expect_list(evaluate_fn(tail[0], env), "car")
    if not xs.items:
        raise SprigEvalError("'car' of empty list")
    return xs.items[0]


def cdr(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> List:
    """Return all but the first element of a non-empty list."""
    _arity(tail, 1, "cdr")
    xs = _expect_list(evaluate_fn(tail[0], env), "cdr")
    if not xs.items:
        raise SprigEvalError("'cdr' of empty list")
    return List(xs.items[1:])


def cons(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> List:
    """Prepend a value to a list (non-destructive)."""
    _arity(tail, 2, "cons")
    head, rest = _eval_args(tail, env, evaluate_fn)
    rest = _expect_list(rest, "cons")
    return List((head, *rest.items))


def append(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> List:
    """Concatenate two lists."""
    _arity(tail, 2, "append")
    xs, ys = _eval_args(tail, env, evaluate_fn)
    return List(_expect_list(xs, "append").items + _expect_list(ys, "append").items)


def length(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Int:
    _arity(tail, 1, "length")
    return Int(len(_expect_list(evaluate_fn(tail[0], env), "length")))


def is_empty(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Bool:
    """Predicate: #t for the empty list."""
    _arity(tail, 1, "empty?")
    return Bool(len(_expect_list(evaluate_fn(tail[0], env), "empty?")) == 0)


def map_builtin(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> List:
    """(map f xs) applies a primitive or lambda to every element of xs.

    The first element that fails aborts the whole map with its error.
    """
    _arity(tail, 2, "map")
    func = evaluate_fn(tail[0], env)
    xs = _expect_list(evaluate_fn(tail[1], env), "map")

    results: list[Value] = []
    match func:
        case Function(fn=fn):
            for item in xs:
                results.append(force(fn([ValueWrapper(item)], env, evaluate_fn), env))
        case Lambda():
            for item in xs:
                results.append(force(invoke_lambda(func, [item], env, evaluate0, tail[0]), env))
        case UnresolvedSymbol(name=name):
            raise SprigNameError(f"Unknown function {name}")
        case _:
            raise SprigTypeError("Invalid type for 'map'")
    return List(tuple(results))


# -------------------------------
# Math
# -------------------------------
def _math_function(name: str, fn: Callable[[float], float]) -> PrimitiveFn:
    def primitive(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Float:
        _arity(tail, 1, name)
        x = evaluate_fn(tail[0], env)
        numeric.check_symbols((x,))
        if not isinstance(x, (Int, Float)):
            raise SprigTypeError(f"Invalid type for '{name}'")
        try:
            return Float(fn(float(x.value)))
        except (ValueError, OverflowError):
            raise SprigEvalError(f"Math domain error in '{name}' for {x}")

    primitive.__name__ = name
    primitive.__doc__ = f"({name} x) for a real x, returning a float."
    return primitive


MATH_FUNCTIONS: dict[str, Callable[[float], float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
    "exp": math.exp,
    "log": math.log,
    "log10": math.log10,
    "sqrt": math.sqrt,
}

PRIMITIVES: dict[str, PrimitiveFn] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "pow": pow_builtin,
    "expt": pow_builtin,
    ">": gt,
    ">=": gte,
    "<": lt,
    "<=": lte,
    "=": equals,
    "equal?": equals,
    "not": logical_not,
    "list": list_builtin,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "append": append,
    "length": length,
    "empty?": is_empty,
    "null?": is_empty,
    "map": map_builtin,
    **{name: _math_function(name, fn) for name, fn in MATH_FUNCTIONS.items()},
}

CONSTANTS: dict[str, Value] = {
    "pi": Float(math.pi),
    "e": Float(math.e),
}


def register(env: Environment) -> None:
    """Register all builtin functions, special forms and constants into `env`."""
    env.update({name: Function(name, fn) for name, fn in SPECIAL_FORMS.items()})
    env.update({name: Function(name, fn) for name, fn in PRIMITIVES.items()})
    env.update(CONSTANTS)
