"""Per-interpreter state shared by the reader, evaluator and primitives."""

from __future__ import annotations

import sys
from itertools import count
from typing import Iterable, TextIO

from littlelisp import LispValue
from littlelisp.config import Settings
from littlelisp.types.cell import Pair
from littlelisp.types.sentinel import Sentinel
from littlelisp.types.symbol import Symbol, SymbolTable


class Runtime:
    """
    Owns everything that must be unique to one interpreter instance:

    - the symbol table, so interned identity never crosses interpreters
    - the sentinels nil, t and the reader's dot / close-paren markers
    - the gensym counter
    - the output stream used by println
    """

    def __init__(self, settings: Settings | None = None, out: TextIO | None = None):
        self.settings: Settings = settings if settings is not None else Settings.from_env()
        self.symbols = SymbolTable()
        self.nil = Sentinel("nil")
        self.true = Sentinel("t")
        self.dot = Sentinel("dot")
        self.close_paren = Sentinel("close-paren")
        self._out = out
        self._gensym_counter = count(0)

    @property
    def out(self) -> TextIO:
        # Resolved lazily so test harnesses that swap sys.stdout are honoured.
        return self._out if self._out is not None else sys.stdout

    def intern(self, name: str) -> Symbol:
        return self.symbols.intern(name)

    def gen_sym(self) -> Symbol:
        return Symbol(f"G_{next(self._gensym_counter)}")

    def boolean(self, value: bool) -> LispValue:
        return self.true if value else self.nil

    # --- list helpers ---
    def make_list(self, items: Iterable[LispValue], tail: LispValue = None) -> LispValue:
        head = self.nil if tail is None else tail
        for item in reversed(list(items)):
            head = Pair(item, head)
        return head

    def list_length(self, lst: LispValue) -> int:
        """Length of a proper list, or -1 for anything else."""
        n = 0
        while isinstance(lst, Pair):
            n += 1
            lst = lst.rest
        return n if lst is self.nil else -1

    def is_list(self, obj: LispValue) -> bool:
        return obj is self.nil or isinstance(obj, Pair)
