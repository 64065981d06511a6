# Core type aliases for Sprig.
#
# Syntax (Node) and runtime results (Value) are explicit sum types, defined in
# sprig.types.node and sprig.types.value. The aliases below name the callable
# shapes that flow between the evaluator, the special forms and the builtins,
# and are kept import-free so every submodule can use them.

from typing import Any, Callable

__version__ = "0.3.0"

# Evaluator function type: (node, env) -> value. Passed to primitives so they
# decide for themselves which argument nodes get evaluated.
EvaluatorFn = Callable[[Any, Any], Any]

# Primitive function type: (argument nodes, env, evaluate_fn) -> value
PrimitiveFn = Callable[[list, Any, EvaluatorFn], Any]
