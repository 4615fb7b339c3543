from littlelisp import LispValue
from littlelisp.evaluation.evaluator import evaluate
from littlelisp.types.environment import Environment
from littlelisp.types.errors import LispArityError, LispTypeError, LispUnboundSymbol
from littlelisp.types.runtime import Runtime
from littlelisp.types.symbol import Symbol


def setq_form(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    """(setq symbol expr): assign to the nearest existing binding of symbol."""
    if runtime.list_length(args) != 2:
        raise LispArityError("Malformed setq")
    var_sym = args.first
    if not isinstance(var_sym, Symbol):
        raise LispTypeError("Malformed setq")
    binding = env.find(var_sym)
    if binding is None:
        raise LispUnboundSymbol(f"Unbound variable {var_sym.name}")
    binding.value = evaluate(args.rest.first, env, runtime)
    return binding.value
