"""Runtime environment for LittleLisp.

An Environment is one frame of bindings plus a link to its enclosing frame.
Bindings are kept in insertion order and searched newest first, so a second
`define` of the same name in one frame shadows the first without removing it.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from littlelisp import LispValue
from littlelisp.types.cell import Pair
from littlelisp.types.errors import LispArityError
from littlelisp.types.symbol import Symbol


class Binding:
    """A (symbol, value) slot; `value` is assigned in place by setq."""

    __slots__ = ("symbol", "value")

    def __init__(self, symbol: Symbol, value: LispValue):
        self.symbol = symbol
        self.value = value

    def __repr__(self):
        return f"Binding({self.symbol}, {self.value!r})"


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("bindings", "parent")

    def __init__(self, parent: Optional[Environment] = None):
        self.bindings: list[Binding] = []
        self.parent: Environment | None = parent

    def add(self, symbol: Symbol, value: LispValue) -> None:
        """Bind `symbol` in this frame, shadowing any earlier binding here."""
        self.bindings.append(Binding(symbol, value))

    def find_local(self, symbol: Symbol) -> Optional[Binding]:
        for binding in reversed(self.bindings):
            if binding.symbol is symbol:
                return binding
        return None

    def find(self, symbol: Symbol) -> Optional[Binding]:
        """Find the nearest binding of `symbol`, walking frames outward."""
        env: Optional[Environment] = self
        while env is not None:
            binding = env.find_local(symbol)
            if binding is not None:
                return binding
            env = env.parent
        return None

    def root(self) -> Environment:
        env = self
        while env.parent is not None:
            env = env.parent
        return env

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{b.symbol}: {b.value!r}" for b in reversed(self.bindings)))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                env._write_vars(buffer)
                first = False
                env = env.parent
            buffer.write(">")
            return buffer.getvalue()


def push_frame(
    parent: Environment,
    params: LispValue,
    args: LispValue,
    strict_arity: bool = False,
) -> Environment:
    """Return a new frame under `parent` binding `params` to `args`.

    `params` is a proper or dotted list of symbols (or nil); a trailing bare
    symbol receives whatever is left of `args`, possibly nil. Surplus
    arguments to a non-variadic list are ignored unless `strict_arity` is set.
    """
    frame = Environment(parent)
    while isinstance(params, Pair):
        if not isinstance(args, Pair):
            raise LispArityError("Cannot apply function: number of arguments does not match")
        frame.add(params.first, args.first)
        params = params.rest
        args = args.rest
    if isinstance(params, Symbol):
        frame.add(params, args)
    elif strict_arity and isinstance(args, Pair):
        raise LispArityError("Cannot apply function: too many arguments")
    return frame
