"""Registry of special forms for the LittleLisp evaluator.

Special forms are ordinary primitives that take their arguments unevaluated;
the evaluator has no syntax of its own. builtin.env_builtin binds each entry
into the root environment under the name given here.
"""

from littlelisp.evaluation.special_forms.quote_forms import quote_form
from littlelisp.evaluation.special_forms.set_form import setq_form
from littlelisp.evaluation.special_forms.define_form import define_form
from littlelisp.evaluation.special_forms.lambda_form import lambda_form, defun_form
from littlelisp.evaluation.special_forms.defmacro_form import defmacro_form
from littlelisp.evaluation.special_forms.macroexpand_forms import macroexpand_form
from littlelisp.evaluation.special_forms.if_form import if_form
from littlelisp.evaluation.special_forms.loop_forms import while_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "setq": setq_form,
    "define": define_form,
    "lambda": lambda_form,
    "defun": defun_form,
    "defmacro": defmacro_form,
    "macroexpand": macroexpand_form,
    "if": if_form,
    "while": while_form,
}
