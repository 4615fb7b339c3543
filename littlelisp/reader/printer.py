"""Textual rendering of runtime values, as used by println and the REPL."""

from __future__ import annotations

from io import StringIO

from littlelisp import LispValue
from littlelisp.types.cell import Integer, Pair
from littlelisp.types.errors import LittleLispError
from littlelisp.types.procedure import Closure, Primitive
from littlelisp.types.sentinel import Sentinel
from littlelisp.types.symbol import Symbol


def _is_nil(obj: LispValue) -> bool:
    return isinstance(obj, Sentinel) and obj.name == "nil"


def _write(obj: LispValue, buffer: StringIO) -> None:
    if isinstance(obj, Integer):
        buffer.write(str(obj.value))
    elif isinstance(obj, Pair):
        buffer.write("(")
        while True:
            _write(obj.first, buffer)
            if _is_nil(obj.rest):
                break
            if not isinstance(obj.rest, Pair):
                buffer.write(" . ")
                _write(obj.rest, buffer)
                break
            buffer.write(" ")
            obj = obj.rest
        buffer.write(")")
    elif isinstance(obj, Symbol):
        buffer.write(obj.name)
    elif isinstance(obj, Primitive):
        buffer.write("<primitive>")
    elif isinstance(obj, Closure):
        buffer.write("<macro>" if obj.is_macro else "<function>")
    elif _is_nil(obj):
        buffer.write("()")
    elif isinstance(obj, Sentinel) and obj.name == "t":
        buffer.write("t")
    else:
        raise LittleLispError(f"bug: render: unknown value {obj!r}")


def render(obj: LispValue) -> str:
    """Return the printed form of `obj`; cyclic lists do not terminate."""
    with StringIO() as buffer:
        _write(obj, buffer)
        return buffer.getvalue()
