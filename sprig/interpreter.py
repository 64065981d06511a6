import logging
from typing import Optional

from sprig.builtin.env_builtin import register
from sprig.config import is_extended_dialect
from sprig.errors import SprigEvalError
from sprig.evaluation.evaluator import evaluate, evaluate0
from sprig.reader.parser import parse_source
from sprig.types.environment import Environment
from sprig.types.node import Node
from sprig.types.value import Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    An interpreter session for Sprig expressions.

    Primitives live in a base scope built once per session; definitions made
    by evaluated code go into a global scope layered on top of it, so they
    persist between calls to `eval` and can shadow (but never clobber) a
    primitive.
    """
    def __init__(self, extended: Optional[bool] = None):
        self.extended = is_extended_dialect() if extended is None else extended
        self.base_env = Environment()
        register(self.base_env)
        self.env = self.base_env.child()

    def eval(self, code: str) -> Value:
        """Parse exactly one top-level form from `code` and evaluate it."""
        node = parse_source(code, self.extended)
        return self.eval_node(node)

    def eval_node(self, node: Node) -> Value:
        """Fully evaluate an already parsed node in the global scope."""
        logger.debug("Evaluating %s", node)
        try:
            return evaluate(node, self.env)
        except RecursionError:
            raise SprigEvalError("Maximum recursion depth exceeded")

    def eval_node_wrapped(self, node: Node) -> Value:
        """Reduce `node` by a single step; the result may be a NodeWrapper."""
        try:
            return evaluate0(node, self.env)
        except RecursionError:
            raise SprigEvalError("Maximum recursion depth exceeded")
