import logging

from mdexpr import EvaluatorFn
from mdexpr.errors import MdexprArityError, MdexprSyntaxError
from mdexpr.types.environment import Environment
from mdexpr.types.expression import Expression
from mdexpr.types.function import DefinedFunction
from mdexpr.types.symbol import Symbol, EMPTY

logger = logging.getLogger(__name__)


def define_form(
    expression: Expression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Symbol:
    """
    (define name (param ...) body)
    The body is stored unevaluated. The new function is registered in the
    current snapshot and published to the root environment, so any snapshot
    taken afterwards (later siblings at top level, later `eval` calls) sees it.
    Snapshots already taken, such as sibling arguments of an enclosing call,
    do not.
    """
    if len(expression) < 4:
        raise MdexprArityError("define requires a name, a parameter list and a body")

    _, name, parameters, body = expression[:4]
    if not isinstance(name, Symbol):
        raise MdexprSyntaxError(f"define name must be a symbol, got {name}")
    if not isinstance(parameters, Expression):
        raise MdexprSyntaxError(f"define parameters must be a list, got {parameters}")
    formals = list(parameters)
    for formal in formals:
        if not isinstance(formal, Symbol):
            raise MdexprSyntaxError(f"define parameter must be a symbol, got {formal}")

    function = DefinedFunction(formals, body, evaluate_fn)
    env.register_function(name, function)
    env.root.register_function(name, function)
    logger.debug("defined %s as %s", name, function)
    return EMPTY
