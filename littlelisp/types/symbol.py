from __future__ import annotations


class Symbol:
    """A named atom. Equality is identity; see SymbolTable for interning."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class SymbolTable:
    """Maps symbol names to exactly one Symbol per name.

    One table belongs to one Runtime. Symbols built directly (gensym) never
    enter the table, so they cannot collide with interned names.
    """

    def __init__(self):
        self._symbols: dict[str, Symbol] = {}

    def intern(self, name: str) -> Symbol:
        sym = self._symbols.get(name)
        if sym is None:
            sym = Symbol(name)
            self._symbols[name] = sym
        return sym

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self):
        return iter(self._symbols.values())
