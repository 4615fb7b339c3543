"""
  Lisp Reader

- Character-cursor reader over a single source string
- Emits the runtime's own value objects:

    - integers -> Integer
    - symbols  -> Symbol, interned in the runtime's SymbolTable
    - lists    -> chains of Pair ending in nil (or in any value, for dotted lists)
    - 'expr    -> (quote expr)
    - .  and ) -> the runtime's dot / close-paren markers, only meaningful
                  while a list is being read

Every call advances the cursor or raises, so reading a finite malformed buffer
always terminates with a LispSyntaxError.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from littlelisp import LispValue
from littlelisp.types.cell import Integer
from littlelisp.types.errors import LispSyntaxError
from littlelisp.types.runtime import Runtime


SYMBOL_CHARS = "~!@#$%^&*-_=+:/?<>"

WHITESPACE = " \t\r\n"

NUMBER_RE = re.compile(r"-?[0-9]+")
SYMBOL_RE = re.compile(
    r"[A-Za-z" + re.escape(SYMBOL_CHARS) + r"][A-Za-z0-9" + re.escape(SYMBOL_CHARS) + r"]*"
)


class Reader:
    def __init__(self, runtime: Runtime):
        self.runtime = runtime
        self._quote = runtime.intern("quote")

    def read(self, source: str, pos: int = 0) -> tuple[Optional[LispValue], int]:
        """Read one expression starting at `pos`.

        Returns (value, new_pos); value is None at end of input. The dot and
        close-paren markers are returned as-is, callers decide if they are legal.
        """
        n = len(source)
        while pos < n:
            c = source[pos]
            if c in WHITESPACE:
                pos += 1
                continue
            if c == ";":
                pos = self._skip_line(source, pos + 1)
                continue
            if c == "(":
                return self._read_list(source, pos + 1, pos)
            if c == ")":
                return self.runtime.close_paren, pos + 1
            if c == ".":
                return self.runtime.dot, pos + 1
            if c == "'":
                return self._read_quote(source, pos + 1, pos)
            m = NUMBER_RE.match(source, pos)
            if m:
                return Integer(int(m.group(0))), m.end()
            m = SYMBOL_RE.match(source, pos)
            if m:
                return self.runtime.intern(m.group(0)), m.end()
            raise LispSyntaxError(f"Don't know how to handle {c}", pos)
        return None, pos

    def read_all(self, source: str) -> Iterator[LispValue]:
        """Yield every top-level form in `source`, in order."""
        pos = 0
        while True:
            start = pos
            obj, pos = self.read(source, pos)
            if obj is None:
                return
            if obj is self.runtime.close_paren:
                raise LispSyntaxError("Stray close parenthesis", start)
            if obj is self.runtime.dot:
                raise LispSyntaxError("Stray dot", start)
            yield obj

    # Skips the input until a newline; the newline (\r or \n) is consumed too.
    @staticmethod
    def _skip_line(source: str, pos: int) -> int:
        n = len(source)
        while pos < n:
            c = source[pos]
            pos += 1
            if c in "\r\n":
                break
        return pos

    def _read_list(self, source: str, pos: int, open_pos: int) -> tuple[LispValue, int]:
        rt = self.runtime
        items: list[LispValue] = []
        while True:
            obj, pos = self.read(source, pos)
            if obj is None:
                raise LispSyntaxError("Unclosed parenthesis", open_pos)
            if obj is rt.close_paren:
                return rt.make_list(items), pos
            if obj is rt.dot:
                dot_pos = pos - 1
                if not items:
                    raise LispSyntaxError("Stray dot", dot_pos)
                last, pos = self.read(source, pos)
                if last is None:
                    raise LispSyntaxError("Unclosed parenthesis", open_pos)
                if last is rt.close_paren or last is rt.dot:
                    raise LispSyntaxError("Stray dot", dot_pos)
                closing, pos = self.read(source, pos)
                if closing is not rt.close_paren:
                    raise LispSyntaxError("Closed parenthesis expected after dot", dot_pos)
                return rt.make_list(items, last), pos
            items.append(obj)

    def _read_quote(self, source: str, pos: int, quote_pos: int) -> tuple[LispValue, int]:
        rt = self.runtime
        obj, pos = self.read(source, pos)
        if obj is None or obj is rt.close_paren or obj is rt.dot:
            raise LispSyntaxError("Quote must be followed by an expression", quote_pos)
        return rt.make_list([self._quote, obj]), pos
