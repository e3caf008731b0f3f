from __future__ import annotations

from typing import List

from mdexpr.types.environment import Environment
from mdexpr.types.expression import Expression
from mdexpr.types.symbol import Symbol, EMPTY


def tail_capture(call: Expression, start: int) -> Expression:
    """Wrap call[start:] behind an EMPTY head so the default rule renders it as-is."""
    return Expression(EMPTY, *call[start:])


def bind_arguments(
    parameters: List[Symbol],
    call: Expression,
    env: Environment,
) -> Environment:
    """
    Bind the raw argument nodes of `call` to `parameters` in `env`.

    - call[0] is the function head; arguments start at call[1]
    - every parameter but the last takes exactly one argument node, unevaluated
    - the last parameter takes all remaining arguments as a tail capture
    - missing arguments leave their parameters unbound (they self-quote)
    - no arity check: surplus arguments only ever land in the tail capture

    Returns `env`, which the caller owns for the duration of the call.
    """
    last = len(parameters) - 1
    for i, parameter in enumerate(parameters):
        if i + 1 >= len(call):
            break
        if i == last:
            env.register_symbol(parameter, tail_capture(call, i + 1))
        else:
            env.register_symbol(parameter, call[i + 1])
    return env
