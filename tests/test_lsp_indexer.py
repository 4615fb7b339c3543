from littlelisp_lsp.indexer import BUILTIN_SIGNATURES, build_index, check_syntax, position_from_offset


def test_definitions_are_indexed():
    text = "(define x 1)\n(defun f (n) n)\n  (defmacro m (a) a)\n"
    idx = build_index(text)
    assert idx.symbols["x"].kind == "var"
    assert idx.symbols["f"].kind == "function"
    assert (idx.symbols["f"].line, idx.symbols["f"].col) == (1, 7)
    assert idx.symbols["m"].kind == "macro"
    assert (idx.symbols["m"].line, idx.symbols["m"].col) == (2, 12)
    assert idx.paren_balance == 0
    assert idx.errors == []


def test_comments_are_skipped():
    idx = build_index("; (define hidden 1)\n(define shown 2)")
    assert "hidden" not in idx.symbols
    assert "shown" in idx.symbols


def test_syntax_error_reported_with_position():
    idx = build_index("(define x 1)\n(define y [)")
    assert len(idx.errors) == 1
    problem = idx.errors[0]
    assert problem.message == "Don't know how to handle ["
    assert (problem.line, problem.col) == (1, 10)


def test_unclosed_list_reported_at_open_paren():
    problem = check_syntax("(define x 1)\n  (defun f (n)")
    assert problem.message == "Unclosed parenthesis"
    assert (problem.line, problem.col) == (1, 2)


def test_clean_buffer_has_no_problem():
    assert check_syntax("(+ 1 2) ; fine") is None


def test_position_from_offset():
    text = "ab\ncd\nef"
    assert position_from_offset(text, 0) == (0, 0)
    assert position_from_offset(text, 4) == (1, 1)
    assert position_from_offset(text, 6) == (2, 0)


def test_builtin_signatures_cover_primitives():
    from littlelisp.builtin.env_builtin import BUILTINS
    from littlelisp.evaluation.special_forms import SPECIAL_FORMS

    assert set(BUILTIN_SIGNATURES) == set(BUILTINS) | set(SPECIAL_FORMS)
