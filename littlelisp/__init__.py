# Core type aliases for LittleLisp's data model.
# Every runtime datum is one of the value classes in littlelisp.types
# (Integer, Pair, Symbol, Primitive, Closure, Sentinel); the aliases below keep
# signatures readable without tying modules to a particular union.
#
# Naming guidance:
# - LispValue:   any runtime value, including forms being evaluated (code is data).
# - PrimitiveFn: the native callable behind a Primitive, called with the
#                caller's environment and the raw, unevaluated argument list.

from typing import Any, Callable

LispValue = Any

PrimitiveFn = Callable[[Any, LispValue], LispValue]
