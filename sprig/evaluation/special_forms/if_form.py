from sprig import EvaluatorFn
from sprig.errors import SprigArityError, SprigTypeError
from sprig.types.environment import Environment
from sprig.types.node import Node
from sprig.types.value import Value, Bool, NodeWrapper


def if_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (if test then else)
    Only the test is evaluated here. The chosen branch is returned unevaluated
    so the trampoline reduces it in tail position.
    """
    if len(tail) != 3:
        raise SprigArityError("'if' takes exactly three arguments")

    test = evaluate_fn(tail[0], env)
    if not isinstance(test, Bool):
        raise SprigTypeError("'if' requires a boolean test")

    return NodeWrapper(tail[1] if test.value else tail[2])
