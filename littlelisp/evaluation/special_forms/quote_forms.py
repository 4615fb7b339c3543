from littlelisp import LispValue
from littlelisp.types.environment import Environment
from littlelisp.types.errors import LispArityError
from littlelisp.types.runtime import Runtime


def quote_form(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    """(quote expr) => expr, unevaluated."""
    if runtime.list_length(args) != 1:
        raise LispArityError("Malformed quote")
    return args.first
