import pytest

from lithp.builtin.env_builtin import new_global_environment
from lithp.evaluation.evaluator import evaluate
from lithp.interpreter import Interpreter
from lithp.reader.parser import parse_all


@pytest.fixture
def env():
    """Fresh global environment with every builtin bound."""
    return new_global_environment()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate each expression of a source string in `env`; return the last value."""
    def _run(source):
        result = None
        for expr in parse_all(source):
            result = evaluate(expr, env)
        return result
    return _run
