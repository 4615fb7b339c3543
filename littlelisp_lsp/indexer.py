from __future__ import annotations

"""
Lightweight indexer for LittleLisp files without evaluating code.

- definitions: (define name ...), (defun name ...), (defmacro name ...)
- syntax errors: the interpreter's own Reader is run over the whole buffer,
  so diagnostics match exactly what evaluation would report.

Definitions are found with a token scan so that partial or broken buffers
still produce symbols for completion and the outline.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import re

from littlelisp.config import Settings
from littlelisp.reader.parser import Reader
from littlelisp.types.errors import LispSyntaxError
from littlelisp.types.runtime import Runtime

# Simple token patterns for scanning
TOKEN_REGEX = re.compile(
    r"\s+|;.*$|\(|\)|'|[^\s()';]+",
    re.MULTILINE,
)

DEFINING_FORMS = {"define": "var", "defun": "function", "defmacro": "macro"}


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function" | "macro"
    line: int
    col: int


@dataclass
class SyntaxProblem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    errors: List[SyntaxProblem] = field(default_factory=list)
    paren_balance: int = 0


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        tok = m.group(0)
        if not tok or tok.isspace() or tok.startswith(";"):
            continue
        yield tok, m.start(), m.end()


def position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def check_syntax(text: str) -> Optional[SyntaxProblem]:
    """Run the reader over `text`; return the first syntax error, if any."""
    reader = Reader(Runtime(Settings()))
    try:
        for _ in reader.read_all(text):
            pass
    except LispSyntaxError as e:
        offset = e.position if e.position is not None else 0
        line, col = position_from_offset(text, offset)
        return SyntaxProblem(message=str(e), line=line, col=col)
    return None


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))

    for i, (tok, start, end) in enumerate(tokens):
        if tok == "(":
            idx.paren_balance += 1
            if i + 2 < len(tokens):
                head = tokens[i + 1][0]
                name, name_start, _ = tokens[i + 2]
                if head in DEFINING_FORMS and name not in ("(", ")", "'"):
                    line, col = position_from_offset(text, name_start)
                    idx.symbols[name] = SymbolDef(
                        name=name, kind=DEFINING_FORMS[head], line=line, col=col
                    )
        elif tok == ")":
            idx.paren_balance -= 1

    problem = check_syntax(text)
    if problem is not None:
        idx.errors.append(problem)
    return idx


# Builtin signatures for quick hover/signature help without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "quote": "(quote expr)",
    "setq": "(setq symbol expr)",
    "define": "(define symbol expr)",
    "lambda": "(lambda (params) body ...)",
    "defun": "(defun name (params) body ...)",
    "defmacro": "(defmacro name (params) body ...)",
    "macroexpand": "(macroexpand form)",
    "if": "(if cond then else ...)",
    "while": "(while cond body ...)",
    "+": "(+ n ...)",
    "-": "(- n ...)",
    "=": "(= a b)",
    "<": "(< a b)",
    "eq": "(eq a b)",
    "cons": "(cons first rest)",
    "join": "(join first rest)",
    "car": "(car cell)",
    "first": "(first cell)",
    "cdr": "(cdr cell)",
    "rest": "(rest cell)",
    "setcar": "(setcar cell value)",
    "setfirst": "(setfirst cell value)",
    "gensym": "(gensym)",
    "println": "(println expr)",
}
