"""Application engine for Sprig lambdas.

Lambda application is call-by-value and substitution based:

- every argument node is evaluated in the caller's environment;
- a child scope of the caller's environment binds each parameter;
- the body is rewritten so every free occurrence of a parameter symbol becomes
  a ValueWrapper around the argument value;
- the rewritten body is reduced one step in the child scope. A body whose
  tail is an `if` therefore hands its chosen branch back to the caller's
  trampoline instead of growing the Python stack.

Because parameters are substituted away before the body runs, a lambda built
inside another lambda already carries the outer arguments in its body. That is
what makes combinators such as compose work without capturing environments.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from sprig import EvaluatorFn
from sprig.errors import SprigArityError
from sprig.types.environment import Environment
from sprig.types.lambda_fn import Lambda
from sprig.types.node import Node, ListNode, SymbolNode, ValueWrapper
from sprig.types.value import Value

logger = logging.getLogger(__name__)

# Forms whose first argument is a binding target rather than a reference
_BINDING_FORMS = ("define", "set!")


def substitute(node: Node, bindings: dict[str, Value]) -> Node:
    """Replace free occurrences of bound parameter symbols in `node`.

    Quoted data is left alone, nested lambdas (and define sugar) that rebind a
    name shadow it, and the target symbol of define/set! is never replaced.
    """
    if not bindings:
        return node

    match node:
        case SymbolNode(name=name) if name in bindings:
            return ValueWrapper(bindings[name])

        case ListNode(items=(SymbolNode(name="quote"), *_)):
            return node

        case ListNode(items=(SymbolNode(name="lambda") as head, ListNode() as params, *body)):
            inner = _without(bindings, params.items)
            return ListNode((head, params, *(substitute(form, inner) for form in body)))

        case ListNode(items=(SymbolNode(name=name) as head, ListNode() as signature, *body)) if name in _BINDING_FORMS:
            # (define (fname params...) body...): params shadow, fname is a target
            inner = _without(bindings, signature.items[1:])
            return ListNode((head, signature, *(substitute(form, inner) for form in body)))

        case ListNode(items=(SymbolNode(name=name) as head, SymbolNode() as target, *rest)) if name in _BINDING_FORMS:
            return ListNode((head, target, *(substitute(form, bindings) for form in rest)))

        case ListNode(items=items):
            return ListNode(tuple(substitute(item, bindings) for item in items))

    return node


def _without(bindings: dict[str, Value], params: Sequence[Node]) -> dict[str, Value]:
    shadowed = {p.name for p in params if isinstance(p, SymbolNode)}
    if not shadowed & bindings.keys():
        return bindings
    return {k: v for k, v in bindings.items() if k not in shadowed}


def bind_arguments(fn: Lambda, args: Sequence[Value], caller_env: Environment) -> tuple[Environment, Node]:
    """Return the call scope and the substituted body for an application."""
    call_env = caller_env.child()
    bindings: dict[str, Value] = {}
    for param, value in zip(fn.params, args):
        call_env.set(param.name, value)
        bindings[param.name] = value
    return call_env, substitute(fn.body, bindings)


def invoke_lambda(
    fn: Lambda,
    args: Sequence[Value],
    caller_env: Environment,
    step_fn: Callable[[Node, Environment], Value],
    callee: object = None,
) -> Value:
    """Apply `fn` to already-evaluated arguments.

    Returns the result of one reduction step of the body, which may be a
    NodeWrapper that the caller's trampoline must finish.
    """
    if len(args) != fn.arity:
        name = fn if callee is None else callee
        raise SprigArityError(f"{name} expects {fn.arity} params, got {len(args)}")
    call_env, body = bind_arguments(fn, args, caller_env)
    logger.debug("Applying %s to (%s)", callee if callee is not None else fn, " ".join(map(str, args)))
    return step_fn(body, call_env)


def apply_lambda(
    fn: Lambda,
    call_nodes: Sequence[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    step_fn: Callable[[Node, Environment], Value],
) -> Value:
    """Apply a Lambda from a call site: (callee arg...).

    Parameters:
    - fn: The Lambda being applied.
    - call_nodes: The full call-site node list, operator first.
    - env: The caller's environment; arguments are evaluated here and the call
      scope is layered over it.
    - evaluate_fn: Full evaluator used for the arguments.
    - step_fn: Single-step evaluator used for the body.
    """
    callee, *arg_nodes = call_nodes
    if len(arg_nodes) != fn.arity:
        raise SprigArityError(f"{callee} expects {fn.arity} params, got {len(arg_nodes)}")
    args = [evaluate_fn(arg, env) for arg in arg_nodes]
    return invoke_lambda(fn, args, env, step_fn, callee)
