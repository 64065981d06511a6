from sprig import EvaluatorFn
from sprig.errors import SprigTypeError
from sprig.types.environment import Environment
from sprig.types.node import Node
from sprig.types.value import Value, Bool, NodeWrapper


def _short_circuit(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn, name: str, decisive: bool) -> Value:
    if not tail:
        return Bool(not decisive)

    for expr in tail[:-1]:
        val = evaluate_fn(expr, env)
        if not isinstance(val, Bool):
            raise SprigTypeError(f"Invalid type for '{name}'")
        if val.value == decisive:
            return val
    # Only the final operand is in tail position
    return NodeWrapper(tail[-1])


def and_form(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates operands left-to-right and returns #f at the
    first #f without evaluating the rest. Every operand but the last must be a
    boolean; the last operand's value is the result. With zero operands,
    returns #t.
    """
    return _short_circuit(tail, env, evaluate_fn, "and", False)


def or_form(tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates operands left-to-right and returns #t at the
    first #t without evaluating the rest. With zero operands, returns #f.
    """
    return _short_circuit(tail, env, evaluate_fn, "or", True)
