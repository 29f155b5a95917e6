"""Registry of special forms for the minilisp evaluator.

Maps head markers to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before operator and
call dispatch. Handlers receive the list tail (everything after the head).
"""

from minilisp.types.markers import Condition, Keyword
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.define_form import define_form
from minilisp.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Condition: if_form,
    Keyword("def"): define_form,
    Keyword("lambda"): lambda_form,
}
