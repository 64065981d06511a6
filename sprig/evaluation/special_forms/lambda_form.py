from sprig import EvaluatorFn
from sprig.errors import SprigArityError, SprigInvalidSymbol, SprigTypeError
from sprig.types.environment import Environment
from sprig.types.lambda_fn import Lambda
from sprig.types.node import Node, ListNode, SymbolNode
from sprig.types.value import Value


def make_lambda(params: Node, body_forms: list[Node]) -> Lambda:
    if not isinstance(params, ListNode):
        raise SprigTypeError("lambda should provide a param list")
    for p in params:
        if not isinstance(p, SymbolNode):
            raise SprigInvalidSymbol(f"Invalid parameter {p}")

    # Several body forms run as an implicit begin
    if len(body_forms) == 1:
        body = body_forms[0]
    else:
        body = ListNode((SymbolNode("begin"), *body_forms))

    return Lambda(params.items, body)


def lambda_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    # (lambda (params...) body...)
    if len(tail) < 2:
        raise SprigArityError("'lambda' requires a parameter list and a body")
    return make_lambda(tail[0], tail[1:])
