from sprig import EvaluatorFn
from sprig.types.environment import Environment
from sprig.types.node import Node
from sprig.types.value import Value, Void


def begin_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    # Definitions made inside the block stay in its own scope
    scope = env.child()
    result: Value = Void
    for form in tail:
        result = evaluate_fn(form, scope)
    return result
