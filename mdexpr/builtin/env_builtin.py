from __future__ import annotations

from functools import partial

from mdexpr import EvaluatorFn
from mdexpr.evaluation.special_forms import SPECIAL_FORMS
from mdexpr.types.environment import Environment
from mdexpr.types.function import DefaultFunction
from mdexpr.types.symbol import Symbol

DEFAULT_FUNCTION = Symbol("___default___")
PAREN = Symbol("___paren___")
NO_SPACES = Symbol("___no_spaces___")

# name -> (separator, skip, prefix, postfix)
DEFAULT_STYLES = {
    DEFAULT_FUNCTION: (" ", 0, "", ""),
    PAREN: (" ", 1, "(", ")"),
    NO_SPACES: ("", 1, "", ""),
}


def register(env: Environment, evaluate_fn: EvaluatorFn) -> None:
    """Seed `env` with the built-in join styles and the special forms."""
    for name, style in DEFAULT_STYLES.items():
        env.register_function(name, DefaultFunction(*style, evaluate_fn=evaluate_fn))
    for name, form in SPECIAL_FORMS.items():
        env.register_function(name, partial(form, evaluate_fn=evaluate_fn))
