import logging

from sprig import EvaluatorFn
from sprig.errors import SprigArityError, SprigInvalidSymbol
from sprig.evaluation.special_forms.lambda_form import make_lambda
from sprig.types.environment import Environment
from sprig.types.node import Node, ListNode, SymbolNode
from sprig.types.value import Value, Void

logger = logging.getLogger(__name__)


def define_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (define name value) or (set! name value)
    (define (name params...) body...) is sugar for (define name (lambda (params...) body...)).

    Both always bind in the innermost scope, which makes define and set!
    the same operation.
    """
    if len(tail) < 2:
        raise SprigArityError("'define' requires a target and a value")

    target = tail[0]
    match target:
        case ListNode(items=(SymbolNode() as name, *params)):
            value = make_lambda(ListNode(params), tail[1:])
        case SymbolNode() as name:
            if len(tail) != 2:
                raise SprigArityError("'define' takes exactly two arguments")
            value = evaluate_fn(tail[1], env)
        case _:
            raise SprigInvalidSymbol(f"Can't define {target}")

    env.set(name.name, value)
    logger.debug("Defined %s at scope depth %d", name, env.depth())
    return Void
