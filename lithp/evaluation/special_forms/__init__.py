"""Registry of special forms for the lithp evaluator.

Maps Symbols to BuiltinForm values that implement non-standard evaluation
rules. The registry is installed into the global environment, so special
forms are found by ordinary symbol lookup and can be shadowed like any other
binding.
"""

from lithp.types.builtin_form import BuiltinForm
from lithp.types.symbol import Symbol
from lithp.evaluation.special_forms.begin_form import begin_form
from lithp.evaluation.special_forms.define_form import define_form
from lithp.evaluation.special_forms.if_form import if_form
from lithp.evaluation.special_forms.lambda_form import lambda_form
from lithp.evaluation.special_forms.quote_form import quote_form

SPECIAL_FORMS = {
    Symbol("begin"): BuiltinForm("begin", begin_form),
    Symbol("define"): BuiltinForm("define", define_form),
    Symbol("if"): BuiltinForm("if", if_form),
    Symbol("lambda"): BuiltinForm("lambda", lambda_form),
    Symbol("quote"): BuiltinForm("quote", quote_form),
}
