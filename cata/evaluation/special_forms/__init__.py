"""Registry of special forms for the cata evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application, so
these names can never be shadowed by a binding.
"""

from cata.types.symbol import Symbol
from cata.evaluation.special_forms.if_form import if_form
from cata.evaluation.special_forms.let_form import let_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("let"): let_form,
}
