"""Application engine for LittleLisp.

Centralizes how callables are applied:
- Primitives receive the caller's env and the unevaluated argument list and
  decide for themselves what to evaluate.
- Function closures get their arguments evaluated left to right, then run
  their body in a new frame whose parent is the closure's captured env.
- Macro closures reuse the same frame/body machinery but bind the argument
  forms as written (see evaluator.macro_expand).
"""

from __future__ import annotations

from littlelisp import LispValue
from littlelisp.types.cell import iter_list
from littlelisp.types.environment import Environment, push_frame
from littlelisp.types.errors import LispTypeError
from littlelisp.types.procedure import Closure, Primitive
from littlelisp.types.runtime import Runtime


def apply_function(fn: Closure, args: LispValue, runtime: Runtime, evaluate_fn) -> LispValue:
    """Bind `args` (already in final form) to fn's params and run its body."""
    frame = push_frame(fn.env, fn.params, args, runtime.settings.strict_arity)
    result = runtime.nil
    for form in iter_list(fn.body):
        result = evaluate_fn(form, frame, runtime)
    return result


def apply(
    fn: Primitive | Closure,
    args: LispValue,
    env: Environment,
    runtime: Runtime,
    evaluate_fn,
) -> LispValue:
    if runtime.list_length(args) < 0:
        raise LispTypeError("argument must be a list")
    if isinstance(fn, Primitive):
        return fn.fn(env, args)
    if isinstance(fn, Closure) and not fn.is_macro:
        values = []
        for arg in iter_list(args):
            values.append(evaluate_fn(arg, env, runtime))
        return apply_function(fn, runtime.make_list(values), runtime, evaluate_fn)
    raise LispTypeError(f"Cannot apply non-function {fn!r}")
