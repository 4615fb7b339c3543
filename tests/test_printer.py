import pytest

from littlelisp.reader.printer import render
from littlelisp.types.cell import Integer, Pair
from littlelisp.types.errors import LittleLispError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", "42"),
        ("-7", "-7"),
        ("'foo", "foo"),
        ("'()", "()"),
        ("t", "t"),
        ("'(1 2 3)", "(1 2 3)"),
        ("'(1 (2 3) ())", "(1 (2 3) ())"),
        ("'(1 . 2)", "(1 . 2)"),
        ("'(1 2 . 3)", "(1 2 . 3)"),
        ("(cons 1 (cons 2 ()))", "(1 2)"),
        ("'(quote x)", "(quote x)"),
        ("''x", "(quote x)"),
        ("car", "<primitive>"),
        ("(lambda (x) x)", "<function>"),
        ("(defmacro m (x) x)", "<macro>"),
    ],
)
def test_render(run, source, expected):
    assert run(source) == expected


def test_render_host_values(rt):
    assert render(Pair(Integer(1), Pair(Integer(2), rt.nil))) == "(1 2)"
    assert render(Pair(Integer(1), rt.true)) == "(1 . t)"


def test_render_reader_markers_is_a_bug(rt):
    with pytest.raises(LittleLispError):
        render(rt.dot)
