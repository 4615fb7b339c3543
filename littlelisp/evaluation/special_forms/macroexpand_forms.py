from littlelisp import LispValue
from littlelisp.evaluation.evaluator import macro_expand
from littlelisp.types.environment import Environment
from littlelisp.types.errors import LispArityError
from littlelisp.types.runtime import Runtime


def macroexpand_form(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    """(macroexpand form): one expansion step, not evaluated. Non-macro forms come back as-is."""
    if runtime.list_length(args) != 1:
        raise LispArityError("Malformed macroexpand")
    return macro_expand(args.first, env, runtime)
