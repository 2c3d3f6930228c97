import pytest

from lispy.builtins import register
from lispy.evaluation.evaluator import evaluate
from lispy.interpreter import Interpreter
from lispy.printer import to_str
from lispy.reader.reader import read_source
from lispy.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate one source line in the shared fixture env and print the result."""
    def _run(source: str) -> str:
        return to_str(evaluate(env, read_source(source)))
    return _run
