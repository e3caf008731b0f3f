"""Core evaluator for mdexpr.

Dispatches each expression on its head symbol: a head bound in the function
namespace handles the whole expression, anything else falls back to the
default join. Every dispatched call receives a fresh environment snapshot.
"""

from __future__ import annotations

import logging
from typing import Optional

from mdexpr import config
from mdexpr.builtin.env_builtin import register, DEFAULT_FUNCTION
from mdexpr.errors import MdexprRecursionError, MdexprTypeError
from mdexpr.types.environment import Environment
from mdexpr.types.expression import Expression
from mdexpr.types.symbol import Symbol, EMPTY

logger = logging.getLogger(__name__)


class Evaluator:
    """
    Owns the root environment and evaluates whole expression trees to text.
    Definitions made by `define` persist in the root across `eval` calls.
    """

    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth: Optional[int] = max_depth if max_depth is not None else config.get_max_depth()
        self._depth = 0
        self.env: Environment = Environment()
        register(self.env, self.eval_inner)

    def eval(self, expression: Expression) -> Symbol:
        """Evaluate `expression` against the root environment."""
        if not isinstance(expression, Expression):
            raise MdexprTypeError(f"Can only evaluate an expression, got {expression!r}")
        outer = self.env.lookup(DEFAULT_FUNCTION)
        self._depth = 0
        try:
            return outer(expression, self.env)
        except RecursionError as exc:
            raise MdexprRecursionError("Evaluation exhausted the interpreter stack") from exc
        finally:
            self._depth = 0

    def eval_inner(self, expression: Expression, env: Environment) -> Symbol:
        """
        Dispatch a nested expression.
        Empty expressions render as EMPTY; otherwise the head picks the function.
        """
        if not isinstance(expression, Expression):
            raise MdexprTypeError(f"Can only evaluate an expression, got {expression!r}")
        if len(expression) == 0:
            return EMPTY

        head = expression[0]
        if isinstance(head, Symbol) and env.exists(head):
            function = env.lookup(head)
        else:
            function = env.lookup(DEFAULT_FUNCTION)

        self._depth += 1
        try:
            if self.max_depth is not None and self._depth > self.max_depth:
                logger.debug("depth limit %d reached at %s", self.max_depth, expression)
                raise MdexprRecursionError(f"Evaluation nested deeper than {self.max_depth} levels")
            return function(expression, env.copy())
        finally:
            self._depth -= 1
