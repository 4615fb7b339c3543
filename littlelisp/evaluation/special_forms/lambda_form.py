from littlelisp import LispValue
from littlelisp.types.cell import Pair
from littlelisp.types.environment import Environment
from littlelisp.types.errors import LispArityError, LispTypeError
from littlelisp.types.procedure import Closure, ClosureKind
from littlelisp.types.runtime import Runtime
from littlelisp.types.symbol import Symbol


def make_closure(
    env: Environment, args: LispValue, runtime: Runtime, kind: ClosureKind
) -> Closure:
    """Build a closure from (params body...), capturing `env` by reference."""
    if (
        not isinstance(args, Pair)
        or not runtime.is_list(args.first)
        or runtime.list_length(args.rest) < 1
    ):
        raise LispArityError("Malformed lambda")

    p = args.first
    while isinstance(p, Pair):
        if not isinstance(p.first, Symbol):
            raise LispTypeError("Parameter must be a symbol")
        p = p.rest
    if p is not runtime.nil and not isinstance(p, Symbol):
        raise LispTypeError("Parameter must be a symbol")

    return Closure(kind, args.first, args.rest, env)


def lambda_form(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    """(lambda (param ... [. rest]) body ...)"""
    return make_closure(env, args, runtime, ClosureKind.FUNCTION)


def define_closure(
    env: Environment, args: LispValue, runtime: Runtime, kind: ClosureKind
) -> Closure:
    if not isinstance(args, Pair) or not isinstance(args.first, Symbol) or not isinstance(args.rest, Pair):
        raise LispArityError("Malformed defun")
    fn = make_closure(env, args.rest, runtime, kind)
    env.add(args.first, fn)
    return fn


def defun_form(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    """(defun name (param ...) body ...)"""
    return define_closure(env, args, runtime, ClosureKind.FUNCTION)
