import pytest

from tinylisp.evaluation.evaluator import evaluate
from tinylisp.reader.parser import parse
from tinylisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment for each test."""
    return Environment(max_depth=100)


@pytest.fixture
def run(env):
    """Parse and evaluate each source line in order against one environment,
    returning the value of the last one."""

    def _run(*sources: str):
        result = None
        for source in sources:
            result = evaluate(parse(source), env)
        return result

    return _run
