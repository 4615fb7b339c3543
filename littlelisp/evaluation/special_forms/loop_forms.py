from littlelisp import LispValue
from littlelisp.evaluation.evaluator import evaluate, progn
from littlelisp.types.environment import Environment
from littlelisp.types.errors import LispArityError
from littlelisp.types.runtime import Runtime


def while_form(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    """(while cond body ...) => nil"""
    if runtime.list_length(args) < 2:
        raise LispArityError("Malformed while")
    cond, body = args.first, args.rest
    while evaluate(cond, env, runtime) is not runtime.nil:
        progn(body, env, runtime)
    return runtime.nil
