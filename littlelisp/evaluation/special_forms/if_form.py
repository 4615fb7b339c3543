from littlelisp import LispValue
from littlelisp.evaluation.evaluator import evaluate, progn
from littlelisp.types.environment import Environment
from littlelisp.types.errors import LispArityError
from littlelisp.types.runtime import Runtime


def if_form(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    if runtime.list_length(args) < 2:
        raise LispArityError("Malformed if")

    # Lisp truthiness: anything but nil is true, including 0
    if evaluate(args.first, env, runtime) is not runtime.nil:
        return evaluate(args.rest.first, env, runtime)
    # else-forms run as an implicit progn; none at all yields nil
    return progn(args.rest.rest, env, runtime)
