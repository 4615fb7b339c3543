"""Core evaluator for the LittleLisp interpreter.

Forms are evaluated in a loop over a single "current form": a macro call is
replaced by its expansion and the loop restarts. Everything else recurses
normally.
"""

from __future__ import annotations

import logging

from littlelisp import LispValue
from littlelisp.evaluation.apply import apply, apply_function
from littlelisp.types.cell import Integer, Pair, iter_list
from littlelisp.types.environment import Environment
from littlelisp.types.errors import LittleLispError, LispTypeError, LispUnboundSymbol
from littlelisp.types.procedure import Closure, Primitive
from littlelisp.types.runtime import Runtime
from littlelisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def is_function(obj: LispValue) -> bool:
    return isinstance(obj, Primitive) or (isinstance(obj, Closure) and not obj.is_macro)


def macro_expand(form: LispValue, env: Environment, runtime: Runtime) -> LispValue:
    """Expand `form` one step if its head names a macro; otherwise return it unchanged."""
    if not isinstance(form, Pair) or not isinstance(form.first, Symbol):
        return form
    binding = env.find(form.first)
    if binding is None:
        return form
    macro = binding.value
    if not isinstance(macro, Closure) or not macro.is_macro:
        return form
    expansion = apply_function(macro, form.rest, runtime, evaluate)
    logger.debug("expanded macro %s", form.first.name)
    return expansion


def evaluate(expr: LispValue, env: Environment, runtime: Runtime) -> LispValue:
    while True:
        # Self-evaluating objects
        if isinstance(expr, (Integer, Primitive)) or expr is runtime.nil or expr is runtime.true:
            return expr
        if isinstance(expr, Closure) and not expr.is_macro:
            return expr

        if isinstance(expr, Symbol):
            binding = env.find(expr)
            if binding is None:
                raise LispUnboundSymbol(f"Undefined symbol: {expr.name}")
            return binding.value

        if isinstance(expr, Pair):
            expanded = macro_expand(expr, env, runtime)
            if expanded is not expr:
                expr = expanded
                continue
            fn = evaluate(expr.first, env, runtime)
            if not is_function(fn):
                raise LispTypeError("The head of a list must be a function")
            return apply(fn, expr.rest, env, runtime, evaluate)

        raise LittleLispError(f"bug: eval: unknown value {expr!r}")


def progn(body: LispValue, env: Environment, runtime: Runtime) -> LispValue:
    """Evaluate each form of `body` in order and return the last result (nil if empty)."""
    result = runtime.nil
    for form in iter_list(body):
        result = evaluate(form, env, runtime)
    return result


def evaluate_list(forms: LispValue, env: Environment, runtime: Runtime) -> LispValue:
    """Evaluate every form left to right and return the results as a new list."""
    return runtime.make_list([evaluate(form, env, runtime) for form in iter_list(forms)])
