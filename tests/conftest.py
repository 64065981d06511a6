import pytest

from sprig.builtin.env_builtin import register
from sprig.evaluation.evaluator import evaluate
from sprig.interpreter import Interpreter
from sprig.reader.parser import parse_source
from sprig.types.environment import Environment


# Tests pin the dialect explicitly, so a SPRIG_* variable in the developer's
# shell never changes what the reader accepts.
@pytest.fixture(autouse=True)
def _clean_sprig_env(monkeypatch):
    for var in ("SPRIG_DIALECT", "SPRIG_LOG_LEVEL", "SPRIG_PROMPT", "SPRIG_RECURSION_LIMIT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def env():
    """Global scope layered over a base scope holding the builtins."""
    base = Environment()
    register(base)
    return base.child()


@pytest.fixture
def interp():
    return Interpreter(extended=True)


@pytest.fixture
def run(env):
    """Parse and evaluate one form against the shared `env` fixture."""
    def _run(source: str):
        return evaluate(parse_source(source, extended=True), env)
    return _run
