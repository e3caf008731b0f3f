"""Function representations for mdexpr.

Every callable an expression head can dispatch to satisfies the `Function`
protocol: it receives the whole call expression (head included) together with
an environment snapshot it owns, and returns a Symbol holding rendered text.
"""

from __future__ import annotations

from io import StringIO
from typing import List, Protocol

from mdexpr import Node, EvaluatorFn
from mdexpr.errors import MdexprTypeError
from mdexpr.types.bind import bind_arguments, tail_capture
from mdexpr.types.environment import Environment
from mdexpr.types.expression import Expression
from mdexpr.types.symbol import Symbol


class Function(Protocol):
    def __call__(self, expression: Expression, environment: Environment) -> Symbol: ...


def _render(node: Node, env: Environment, evaluate_fn: EvaluatorFn) -> str:
    # Sub-expressions always run against their own snapshot
    return evaluate_fn(node, env.copy()).value


class DefaultFunction:
    """Join the items of an expression into text.

    The first `skip` items are dropped, the rest are rendered and joined with
    `separator`, and the whole is wrapped in `prefix` / `postfix`.
    """

    __slots__ = ("separator", "skip", "prefix", "postfix", "evaluate_fn")

    def __init__(self, separator: str, skip: int, prefix: str, postfix: str, evaluate_fn: EvaluatorFn):
        self.separator = separator
        self.skip = skip
        self.prefix = prefix
        self.postfix = postfix
        self.evaluate_fn = evaluate_fn

    def __call__(self, expression: Expression, environment: Environment) -> Symbol:
        with StringIO() as buffer:
            buffer.write(self.prefix)
            skipped = 0
            for item in expression:
                if skipped < self.skip:
                    skipped += 1
                    continue
                if isinstance(item, Symbol):
                    found = environment.lookup_value(item)
                    if isinstance(found, Symbol):
                        buffer.write(found.value)
                    else:
                        buffer.write(_render(found, environment, self.evaluate_fn))
                else:
                    buffer.write(_render(item, environment, self.evaluate_fn))
                buffer.write(self.separator)
            text = buffer.getvalue()

        if len(expression) > 1 and len(expression) >= skipped and self.separator:
            text = text[: -len(self.separator)]
        return Symbol((text + self.postfix).strip())

    def __repr__(self) -> str:
        return (
            f"DefaultFunction(separator={self.separator!r}, skip={self.skip}, "
            f"prefix={self.prefix!r}, postfix={self.postfix!r})"
        )


class DefinedFunction:
    """A function created by `define`: formal parameters plus an unevaluated body."""

    __slots__ = ("parameters", "body", "evaluate_fn")

    def __init__(self, parameters: List[Symbol], body: Node, evaluate_fn: EvaluatorFn):
        self.parameters: List[Symbol] = parameters
        self.body: Node = body
        self.evaluate_fn = evaluate_fn

    def __call__(self, expression: Expression, environment: Environment) -> Symbol:
        # A tail capture returned by a symbol body renders in the caller scope
        caller = environment.copy()
        bind_arguments(self.parameters, expression, environment)
        if isinstance(self.body, Symbol):
            return self._passthrough(expression, caller)
        return self._expand(environment)

    def _passthrough(self, expression: Expression, caller: Environment) -> Symbol:
        """A Symbol body returns the argument its parameter received, unevaluated."""
        if self.body not in self.parameters:
            return self.body
        index = self.parameters.index(self.body)
        if index + 1 >= len(expression):
            return self.body
        if index == len(self.parameters) - 1:
            # Tail capture: the only argument form that renders to text
            return self.evaluate_fn(tail_capture(expression, index + 1), caller.copy())
        argument = expression[index + 1]
        if not isinstance(argument, Symbol):
            raise MdexprTypeError(
                f"Parameter {self.body} received expression {argument}, which cannot be returned as a symbol"
            )
        return argument

    def _expand(self, environment: Environment) -> Symbol:
        # Symbol results are always followed by a space, expression results never are
        with StringIO() as buffer:
            for item in self.body:
                if isinstance(item, Symbol):
                    found = environment.lookup_value(item)
                    if isinstance(found, Symbol):
                        buffer.write(found.value)
                        buffer.write(" ")
                    else:
                        buffer.write(_render(found, environment, self.evaluate_fn))
                else:
                    buffer.write(_render(item, environment, self.evaluate_fn))
            return Symbol(buffer.getvalue().strip())

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(λ (")
            buffer.write(" ".join(str(p) for p in self.parameters))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
