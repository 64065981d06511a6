from sprig import EvaluatorFn
from sprig.errors import SprigArityError
from sprig.types.environment import Environment
from sprig.types.node import Node, ListNode, StringNode, ValueWrapper
from sprig.types.value import Value, List, Literal, String


def quote_node(node: Node) -> Value:
    """Convert syntax to data without evaluating any of it.

    Atoms become Literal values holding their source text, lists become List
    values of converted children. Strings stay strings and a ValueWrapper
    yields the value it carries.
    """
    match node:
        case ListNode(items=items):
            return List(tuple(quote_node(item) for item in items))
        case StringNode(value=text):
            return String(text)
        case ValueWrapper(value=value):
            return value
    return Literal(str(node))


def quote_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    if len(tail) != 1:
        raise SprigArityError("'quote' takes exactly one argument")
    return quote_node(tail[0])
