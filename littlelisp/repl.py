"""Interactive front end: read until parentheses balance, evaluate, print."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from littlelisp.interpreter import Interpreter
from littlelisp.reader.printer import render
from littlelisp.types.errors import LittleLispError

logger = logging.getLogger(__name__)

PROMPT = ": "
CONTINUATION_PROMPT = "> "


def open_brackets(text: str) -> int:
    """Number of '(' not yet closed in `text`; comments are ignored."""
    depth = 0
    in_comment = False
    for c in text:
        if in_comment:
            if c in "\r\n":
                in_comment = False
        elif c == ";":
            in_comment = True
        elif c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
    return depth


def read_input(stdin: TextIO, stdout: TextIO) -> str | None:
    """Read one line, plus continuation lines while a list is still open. None on EOF."""
    stdout.write(PROMPT)
    stdout.flush()
    text = stdin.readline()
    if not text:
        return None
    while open_brackets(text) > 0:
        stdout.write(CONTINUATION_PROMPT)
        stdout.flush()
        more = stdin.readline()
        if not more:
            return None
        text += more
    return text


def repl(
    interpreter: Interpreter | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    interpreter = interpreter if interpreter is not None else Interpreter()
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    while (text := read_input(stdin, stdout)) is not None:
        try:
            result = interpreter.eval(text)
        except LittleLispError as e:
            # Discard the failed input and carry on with the next one.
            logger.debug("input failed", exc_info=True)
            stderr.write(f"{e}\n")
            continue
        if result is not None:
            stdout.write(render(result))
            stdout.write("\n")
    stdout.write("\n")
