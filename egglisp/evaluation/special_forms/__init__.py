"""Registry of special forms for the egglisp evaluator.

Maps names to handler functions that receive their argument forms
unevaluated. The builtin registry installs each one into the global
environment as a NativeSpecialForm value.
"""

from egglisp.evaluation.special_forms.define_form import define_form
from egglisp.evaluation.special_forms.if_form import if_form
from egglisp.evaluation.special_forms.lambda_form import lambda_form, macro_form
from egglisp.evaluation.special_forms.progn_form import progn_form
from egglisp.evaluation.special_forms.quote_forms import quote_form
from egglisp.evaluation.special_forms.set_form import set_form, set_nonlocal_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "if": if_form,
    "def": define_form,
    "set!": set_form,
    "set*": set_nonlocal_form,
    "fn": lambda_form,
    "macro": macro_form,
    "begin": progn_form,
}
