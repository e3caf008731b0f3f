import pytest

from mdexpr import Evaluator, Expression, build


@pytest.fixture
def evaluator():
    return Evaluator(max_depth=None)


@pytest.fixture
def render(evaluator):
    """Evaluate a nested list as a whole document (top level is always joined text)."""
    def _render(tree):
        return evaluator.eval(build(tree)).value
    return _render


@pytest.fixture
def run(evaluator):
    """Evaluate a single nested list as a call inside a one-item document."""
    def _run(tree):
        return evaluator.eval(Expression(build(tree))).value
    return _run
