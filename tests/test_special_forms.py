import pytest

from littlelisp.types.errors import LispArityError, LispTypeError, LispUnboundSymbol
from littlelisp.types.procedure import Closure


# -------------------------
# quote
# -------------------------

def test_quote_returns_form_unevaluated(itp, run):
    assert run("(quote (+ 1 2))") == "(+ 1 2)"
    assert itp.eval("(quote undefined-name)") is itp.intern("undefined-name")


@pytest.mark.parametrize("source", ["(quote)", "(quote a b)"])
def test_quote_arity(itp, source):
    with pytest.raises(LispArityError, match="Malformed quote"):
        itp.eval(source)


# -------------------------
# define / setq
# -------------------------

def test_define_returns_value(itp):
    assert itp.eval("(define x (+ 1 2))") == 3
    assert itp.eval("x") == 3


def test_define_binds_in_current_frame(itp):
    itp.eval("(define x 1)")
    itp.eval("(defun f () (define x 99) x)")
    assert itp.eval("(f)") == 99
    assert itp.eval("x") == 1


@pytest.mark.parametrize("source", ["(define x)", "(define 1 2)", "(define x 1 2)"])
def test_define_malformed(itp, source):
    with pytest.raises((LispArityError, LispTypeError), match="Malformed define"):
        itp.eval(source)


def test_setq_updates_nearest_binding(itp):
    itp.eval("(define x 1)")
    itp.eval("(defun bump () (setq x (+ x 1)))")
    assert itp.eval("(bump)") == 2
    assert itp.eval("x") == 2


def test_setq_updates_local_binding_only(itp):
    itp.eval("(define x 1)")
    assert itp.eval("((lambda (x) (setq x 5) x) 0)") == 5
    assert itp.eval("x") == 1


def test_setq_unbound(itp):
    with pytest.raises(LispUnboundSymbol, match="Unbound variable y"):
        itp.eval("(setq y 1)")


def test_setq_requires_symbol(itp):
    with pytest.raises(LispTypeError, match="Malformed setq"):
        itp.eval("(setq 1 2)")


# -------------------------
# lambda / defun / defmacro
# -------------------------

def test_lambda_returns_function_closure(itp):
    fn = itp.eval("(lambda (a b) a)")
    assert isinstance(fn, Closure)
    assert not fn.is_macro
    assert fn.env is itp.env


def test_defun_binds_and_returns_closure(itp):
    fn = itp.eval("(defun id (x) x)")
    assert isinstance(fn, Closure)
    assert itp.eval("id") is fn
    assert itp.eval("(id 4)") == 4


def test_defmacro_binds_macro(itp):
    m = itp.eval("(defmacro m (x) x)")
    assert m.is_macro
    assert itp.eval("m") is m


@pytest.mark.parametrize(
    "source,error",
    [
        ("(lambda)", LispArityError),
        ("(lambda (x))", LispArityError),
        ("(lambda x x)", LispArityError),
        ("(lambda (1) 1)", LispTypeError),
        ("(lambda (a . 1) 1)", LispTypeError),
        ("(lambda (x) x . 1)", LispTypeError),
        ("(defun 1 (x) x)", LispArityError),
        ("(defun f)", LispArityError),
        ("(defmacro m)", LispArityError),
    ],
)
def test_malformed_closures(itp, source, error):
    with pytest.raises(error):
        itp.eval(source)


def test_empty_parameter_list(itp):
    assert itp.eval("((lambda () 7))") == 7


# -------------------------
# if
# -------------------------

def test_if_branches(itp):
    assert itp.eval("(if t 1 2)") == 1
    assert itp.eval("(if () 1 2)") == 2


def test_if_without_else_is_nil(itp):
    assert itp.eval("(if () 1)") is itp.runtime.nil


def test_if_else_forms_are_progn(itp, capsys):
    assert itp.eval("(if () 1 (println 'a) (println 'b) 3)") == 3
    assert capsys.readouterr().out == "a\nb\n"


def test_if_only_evaluates_chosen_branch(itp, capsys):
    itp.eval("(if t (println 'then) (println 'else))")
    assert capsys.readouterr().out == "then\n"


def test_if_arity(itp):
    with pytest.raises(LispArityError, match="Malformed if"):
        itp.eval("(if t)")


# -------------------------
# while
# -------------------------

def test_while_loop(itp):
    itp.eval(
        """
        (define i 0)
        (define total 0)
        (define result (while (< i 5) (setq total (+ total i)) (setq i (+ i 1))))
        """
    )
    assert itp.eval("total") == 10
    assert itp.eval("i") == 5
    assert itp.eval("result") is itp.runtime.nil


def test_while_false_condition_never_runs_body(itp, capsys):
    assert itp.eval("(while () (println 1))") is itp.runtime.nil
    assert capsys.readouterr().out == ""


def test_while_arity(itp):
    with pytest.raises(LispArityError, match="Malformed while"):
        itp.eval("(while t)")


# -------------------------
# special forms are ordinary values
# -------------------------

def test_special_forms_can_be_rebound(itp):
    itp.eval("(define my-if if)")
    assert itp.eval("(my-if () 1 2)") == 2
