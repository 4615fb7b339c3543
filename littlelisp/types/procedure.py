"""Callable values: built-in primitives and user closures (functions and macros)."""

from __future__ import annotations

from enum import Enum

from littlelisp import LispValue, PrimitiveFn
from littlelisp.types.environment import Environment


class Primitive:
    """A built-in operation receiving the caller's env and the unevaluated argument list."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: LispValue) -> LispValue:
        return self.fn(env, args)

    def __repr__(self):
        return f"<primitive {self.name}>"


class ClosureKind(Enum):
    FUNCTION = "function"
    MACRO = "macro"


class Closure:
    """A user function or macro with its parameter spec, body forms and captured env.

    The captured env is held by reference: later changes to bindings visible
    from it are seen by every call.
    """

    __slots__ = ("kind", "params", "body", "env")

    def __init__(
        self, kind: ClosureKind, params: LispValue, body: LispValue, env: Environment
    ):
        self.kind = kind
        self.params: LispValue = params
        self.body: LispValue = body
        self.env: Environment = env

    @property
    def is_macro(self) -> bool:
        return self.kind is ClosureKind.MACRO

    def __repr__(self):
        return f"<{self.kind.value}>"
