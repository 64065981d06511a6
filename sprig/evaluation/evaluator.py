"""Core evaluator and trampoline for the Sprig interpreter.

Evaluation is split in two levels so that tail positions never grow the
Python stack:

- evaluate0 performs exactly one reduction step. Instead of recursing into a
  tail position it may return NodeWrapper(next_node).
- evaluate is the trampoline: it keeps calling evaluate0, swapping in the
  wrapped continuation, until a real value comes back.

Primitives (including the special forms) receive their argument nodes
unevaluated, together with the environment and `evaluate`, and decide for
themselves what to evaluate.
"""

from __future__ import annotations

from sprig.errors import SprigNameError, SprigTypeError
from sprig.evaluation.apply import apply_lambda
from sprig.types.environment import Environment
from sprig.types.lambda_fn import Lambda
from sprig.types.node import (
    Node,
    BoolNode,
    ComplexNode,
    FloatNode,
    IntNode,
    ListNode,
    StringNode,
    SymbolNode,
    ValueWrapper,
)
from sprig.types.value import (
    Value,
    Bool,
    Complex,
    Float,
    Function,
    Int,
    List,
    NodeWrapper,
    String,
    UnresolvedSymbol,
)


def evaluate(node: Node, env: Environment) -> Value:
    """
    Trampoline evaluator: reduce `node` until a non-wrapper value is produced.
    """
    result = evaluate0(node, env)
    while isinstance(result, NodeWrapper):
        result = evaluate0(result.node, env)
    return result


def force(value: Value, env: Environment) -> Value:
    """Finish a value that may still be a deferred NodeWrapper."""
    while isinstance(value, NodeWrapper):
        value = evaluate0(value.node, env)
    return value


def evaluate0(node: Node, env: Environment) -> Value:
    """
    Core evaluator: a single reduction step.
    Returns either a value or a NodeWrapper continuation.
    """
    match node:
        case ValueWrapper(value=value):
            return value
        case IntNode(value=v):
            return Int(v)
        case FloatNode(value=v):
            return Float(v)
        case BoolNode(value=v):
            return Bool(v)
        case StringNode(value=v):
            return String(v)
        case ComplexNode(real=re, imag=im):
            return Complex(re, im)
        case SymbolNode():
            found = env.get(node.name)
            # Unresolved names are data until something consumes them
            return UnresolvedSymbol(node.name) if found is None else found
        case ListNode(items=()):
            return List(())
        case ListNode(items=(head, *tail_args)):
            operator = evaluate0(head, env)
            match operator:
                case UnresolvedSymbol(name=name):
                    raise SprigNameError(f"Unknown function {name}")
                case Function(fn=fn):
                    return fn(tail_args, env, evaluate)
                case Lambda():
                    return apply_lambda(operator, node.items, env, evaluate, evaluate0)
                case NodeWrapper(node=inner):
                    # Operator needs more reduction; retry the call through the trampoline
                    return NodeWrapper(ListNode((inner, *tail_args)))
                case _:
                    raise SprigTypeError(f"Invalid function call {node}")

    raise SprigTypeError(f"Cannot evaluate {node!r}")
