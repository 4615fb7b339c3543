from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, TextIO

from littlelisp import LispValue
from littlelisp.builtin.env_builtin import register
from littlelisp.config import Settings
from littlelisp.evaluation.evaluator import evaluate
from littlelisp.reader.parser import Reader
from littlelisp.reader.printer import render
from littlelisp.types.environment import Environment
from littlelisp.types.errors import LispRecursionError
from littlelisp.types.runtime import Runtime

logger = logging.getLogger(__name__)

__all__ = ["Interpreter", "render"]


@contextmanager
def recursion_limit(limit: int):
    """Raise the host recursion limit to at least `limit` for the duration."""
    previous = sys.getrecursionlimit()
    if limit > previous:
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Interpreter:
    """
    Orchestrates reading and evaluating LittleLisp code.

    Each instance owns its Runtime (symbol table, nil/t, gensym counter) and
    a root Environment holding the primitives; nothing is shared between
    instances.
    """

    def __init__(self, settings: Settings | None = None, out: TextIO | None = None):
        self.runtime: Runtime = Runtime(settings, out)
        self.reader: Reader = Reader(self.runtime)
        self.env: Environment = Environment()
        register(self.env, self.runtime)

    def eval(self, code: str, env: Optional[Environment] = None) -> Optional[LispValue]:
        """Read and evaluate every top-level form in `code`, returning the last value.

        Returns None when `code` holds no forms. The first error propagates and
        the forms after it are not evaluated; earlier forms keep their effects.
        """
        if env is None:
            env = self.env
        result = None
        with recursion_limit(self.runtime.settings.recursion_limit):
            try:
                for form in self.reader.read_all(code):
                    if logger.isEnabledFor(logging.DEBUG):
                        logger.debug("evaluating %s", render(form))
                    result = evaluate(form, env, self.runtime)
            except RecursionError:
                raise LispRecursionError("Stack depth exceeded") from None
        return result

    evaluate = eval

    def eval_file(self, path: str | Path) -> Optional[LispValue]:
        return self.eval(Path(path).read_text())

    def intern(self, name: str):
        return self.runtime.intern(name)

    @staticmethod
    def render(value: LispValue) -> str:
        return render(value)
