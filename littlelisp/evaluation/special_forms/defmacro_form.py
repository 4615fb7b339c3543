from littlelisp import LispValue
from littlelisp.evaluation.special_forms.lambda_form import define_closure
from littlelisp.types.environment import Environment
from littlelisp.types.procedure import ClosureKind
from littlelisp.types.runtime import Runtime


def defmacro_form(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    """
    (defmacro name (param ...) body ...)

    Same shape as defun. The body runs with the argument forms bound as
    written and must return the code that replaces the call.
    """
    return define_closure(env, args, runtime, ClosureKind.MACRO)
