"""Integer and Pair values.

Both are plain mutable objects so that identity (`eq`) is object identity and
in-place mutation of a Pair is visible to every holder.
"""

from __future__ import annotations

from littlelisp import LispValue


class Integer:
    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value: int = value

    def __eq__(self, other) -> bool:
        if isinstance(other, Integer):
            return self.value == other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __repr__(self):
        return f"Integer({self.value})"


class Pair:
    __slots__ = ("first", "rest")

    def __init__(self, first: LispValue, rest: LispValue):
        self.first: LispValue = first
        self.rest: LispValue = rest

    def __iter__(self):
        return iter_list(self)

    def __repr__(self):
        return f"Pair({self.first!r}, {self.rest!r})"


def iter_list(obj: LispValue):
    """Yield the elements of a list; stops at nil or at a dotted tail."""
    while isinstance(obj, Pair):
        yield obj.first
        obj = obj.rest
