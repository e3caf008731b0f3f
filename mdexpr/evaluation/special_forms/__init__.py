"""Registry of special forms for the mdexpr evaluator.

Maps Symbols to handler functions that receive the raw call expression instead
of rendered text. The builtin registration binds each handler to the
evaluator's dispatch and installs it in the root environment.
"""

from mdexpr.types.symbol import Symbol
from mdexpr.evaluation.special_forms.define_form import define_form

DEFINE = Symbol("___define___")

SPECIAL_FORMS = {
    DEFINE: define_form,
}
