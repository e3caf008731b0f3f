# Core type aliases for the mdexpr data model.
# A tree is built from two node kinds, Symbol (leaf) and Expression (branch).
# Evaluation always yields a Symbol holding the flattened text.
#
# Naming guidance:
# - Node:        Use wherever either kind of tree node is accepted.
# - EvaluatorFn: Dispatch callable handed to functions that evaluate sub-trees.

import logging
from typing import Any, Callable

# Tree node alias (Symbol | Expression); kept loose to avoid import cycles
Node = Any

# Evaluator dispatch: (node, environment) -> Symbol
EvaluatorFn = Callable[..., Any]

logging.getLogger(__name__).addHandler(logging.NullHandler())

from mdexpr.types.symbol import Symbol, EMPTY  # noqa: E402
from mdexpr.types.expression import Expression, build  # noqa: E402
from mdexpr.evaluation.evaluator import Evaluator  # noqa: E402

__all__ = ["Node", "EvaluatorFn", "Symbol", "EMPTY", "Expression", "build", "Evaluator"]
