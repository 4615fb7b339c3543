import logging
import sys
from pathlib import Path

from littlelisp.config import Settings
from littlelisp.interpreter import Interpreter
from littlelisp.repl import repl
from littlelisp.types.errors import LittleLispError


def print_usage():
    print("Usage: littlelisp [file]")


def main(argv=None) -> int:
    argv = sys.argv if argv is None else argv
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    match argv:
        case [_]:
            repl(Interpreter(settings))
            return 0
        case [_, filename] if Path(filename).is_file():
            try:
                Interpreter(settings).eval_file(filename)
            except LittleLispError as e:
                print(e, file=sys.stderr)
                return 1
            return 0
        case _:
            print_usage()
            return 2


if __name__ == "__main__":
    sys.exit(main())
