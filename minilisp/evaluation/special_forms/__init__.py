"""Registry of special forms for the minilisp evaluator.

Maps symbol names to handler functions that implement non-standard evaluation
rules. The evaluator consults this table before ordinary function application,
so these names cannot be shadowed by `define`.
"""

from minilisp.evaluation.special_forms.quote_form import quote_form
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.define_form import define_form
from minilisp.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "if": if_form,
    "define": define_form,
    "lambda": lambda_form,
}
