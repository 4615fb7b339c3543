from io import StringIO

import pytest

from littlelisp.config import Settings
from littlelisp.interpreter import Interpreter
from littlelisp.repl import open_brackets, repl


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", 0),
        ("(+ 1 2)", 0),
        ("(defun f (x)", 2),
        ("(a ; (((\n", 1),
        ("())", -1),
    ],
)
def test_open_brackets(text, expected):
    assert open_brackets(text) == expected


def _run_repl(source: str):
    stdin, stdout, stderr = StringIO(source), StringIO(), StringIO()
    repl(Interpreter(Settings(), out=stdout), stdin, stdout, stderr)
    return stdout.getvalue(), stderr.getvalue()


def test_repl_prints_results():
    out, err = _run_repl("(+ 1 2)\n'(a . b)\n")
    assert out == ": 3\n: (a . b)\n: \n"
    assert err == ""


def test_repl_accumulates_until_balanced():
    out, _ = _run_repl("(defun f (x)\n  (+ x 1))\n(f 1)\n")
    assert out == ": > <function>\n: 2\n: \n"


def test_repl_recovers_after_error():
    out, err = _run_repl("(car 5)\n(define x 7)\nx\n")
    assert "Malformed car" in err
    assert out.endswith(": 7\n: 7\n: \n")


def test_repl_blank_line_prints_nothing():
    out, _ = _run_repl("\n1\n")
    assert out == ": : 1\n: \n"


def test_repl_println_goes_to_stdout():
    out, _ = _run_repl("(println 5)\n")
    assert out == ": 5\n()\n: \n"


def test_repl_stops_on_eof_inside_form():
    out, _ = _run_repl("(+ 1\n")
    assert out == ": > \n"
