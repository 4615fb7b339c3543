from littlelisp import LispValue
from littlelisp.evaluation.evaluator import evaluate
from littlelisp.types.environment import Environment
from littlelisp.types.errors import LispArityError, LispTypeError
from littlelisp.types.runtime import Runtime
from littlelisp.types.symbol import Symbol


def define_form(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    """
    (define name value)
    Always binds in the current frame; an existing binding of the same name
    there is shadowed, not replaced.
    """
    if runtime.list_length(args) != 2:
        raise LispArityError("Malformed define")
    name = args.first
    if not isinstance(name, Symbol):
        raise LispTypeError("Malformed define")
    value = evaluate(args.rest.first, env, runtime)
    env.add(name, value)
    return value
