"""Built-in functions for the LittleLisp runtime environment.

Each builtin has the primitive signature (env, args, runtime): `args` is the
raw argument list from the call site and every builtin here evaluates it
left to right before doing its work. The special forms in
evaluation.special_forms share the signature but choose what to evaluate.
"""
from __future__ import annotations

from functools import wraps

from littlelisp import LispValue
from littlelisp.evaluation.evaluator import evaluate_list
from littlelisp.evaluation.special_forms import SPECIAL_FORMS
from littlelisp.reader.printer import render
from littlelisp.types.cell import Integer, Pair, iter_list
from littlelisp.types.environment import Environment
from littlelisp.types.errors import LispArityError, LispTypeError
from littlelisp.types.procedure import Primitive
from littlelisp.types.runtime import Runtime


def _evaluate_exactly(
    name: str, count: int, env: Environment, args: LispValue, runtime: Runtime
) -> list[LispValue]:
    if runtime.list_length(args) != count:
        raise LispArityError(f"Malformed {name}")
    return list(iter_list(evaluate_list(args, env, runtime)))


def _integers(name: str, values: list[LispValue]) -> list[int]:
    for v in values:
        if not isinstance(v, Integer):
            raise LispTypeError(f"{name} takes only numbers")
    return [v.value for v in values]


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    """(+ n ...) => sum of all arguments; (+) => 0."""
    values = list(iter_list(evaluate_list(args, env, runtime)))
    return Integer(sum(_integers("+", values)))


def sub(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    values = list(iter_list(evaluate_list(args, env, runtime)))
    if not values:
        raise LispArityError("- requires at least 1 argument")
    nums = _integers("-", values)
    if len(nums) == 1:
        return Integer(-nums[0])
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return Integer(result)


# -------------------------------
# Comparison
# -------------------------------
def num_eq(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    x, y = _integers("=", _evaluate_exactly("=", 2, env, args, runtime))
    return runtime.boolean(x == y)


def num_lt(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    x, y = _integers("<", _evaluate_exactly("<", 2, env, args, runtime))
    return runtime.boolean(x < y)


def eq(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    """Identity comparison: interned symbols and the same cell are eq, equal integers need not be."""
    x, y = _evaluate_exactly("eq", 2, env, args, runtime)
    return runtime.boolean(x is y)


# -------------------------------
# Pairs
# -------------------------------
def cons(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    """(cons a b) => (a . b); b is used as-is, so dotted pairs are built directly."""
    first, rest = _evaluate_exactly("cons", 2, env, args, runtime)
    return Pair(first, rest)


def _pair_arg(name: str, env: Environment, args: LispValue, runtime: Runtime) -> Pair:
    (cell,) = _evaluate_exactly(name, 1, env, args, runtime)
    if not isinstance(cell, Pair):
        raise LispTypeError(f"Malformed {name}")
    return cell


def car(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    return _pair_arg("car", env, args, runtime).first


def cdr(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    return _pair_arg("cdr", env, args, runtime).rest


def setcar(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    """(setcar cell value): replace cell's first slot in place and return the cell."""
    cell, value = _evaluate_exactly("setcar", 2, env, args, runtime)
    if not isinstance(cell, Pair):
        raise LispTypeError("Malformed setcar")
    cell.first = value
    return cell


# -------------------------------
# Misc
# -------------------------------
def gensym(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    """(gensym) => a fresh uninterned symbol G_0, G_1, ..."""
    if args is not runtime.nil:
        raise LispArityError("Malformed gensym")
    return runtime.gen_sym()


def println(env: Environment, args: LispValue, runtime: Runtime) -> LispValue:
    (value,) = _evaluate_exactly("println", 1, env, args, runtime)
    out = runtime.out
    out.write(render(value))
    out.write("\n")
    return runtime.nil


BUILTINS = {
    "+": add,
    "-": sub,
    "=": num_eq,
    "<": num_lt,
    "eq": eq,
    "cons": cons,
    "join": cons,
    "car": car,
    "first": car,
    "cdr": cdr,
    "rest": cdr,
    "setcar": setcar,
    "setfirst": setcar,
    "gensym": gensym,
    "println": println,
}


def bind_runtime(fn, runtime: Runtime):
    """Close `fn` over `runtime`, giving it the (env, args) primitive signature."""
    @wraps(fn)
    def primitive(env: Environment, args: LispValue) -> LispValue:
        return fn(env, args, runtime)
    return primitive


def register(env: Environment, runtime: Runtime) -> None:
    """Populate the root frame with `t`, the special forms and the builtins."""
    env.add(runtime.intern("t"), runtime.true)
    for table in (SPECIAL_FORMS, BUILTINS):
        for name, fn in table.items():
            env.add(runtime.intern(name), Primitive(name, bind_runtime(fn, runtime)))
