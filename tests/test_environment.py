import pytest

from littlelisp.types.cell import Integer
from littlelisp.types.environment import Environment, push_frame
from littlelisp.types.errors import LispArityError


@pytest.fixture
def syms(rt):
    return {name: rt.intern(name) for name in ("a", "b", "c", "rest")}


def test_lookup_finds_newest_binding_in_frame(syms):
    env = Environment()
    env.add(syms["a"], Integer(1))
    env.add(syms["a"], Integer(2))
    assert env.find(syms["a"]).value == 2
    # the older binding is shadowed, not removed
    assert [b.value for b in env.bindings] == [1, 2]


def test_lookup_walks_to_parent(syms):
    root = Environment()
    root.add(syms["a"], Integer(1))
    child = Environment(root)
    child.add(syms["b"], Integer(2))
    assert child.find(syms["a"]).value == 1
    assert child.find(syms["b"]).value == 2
    assert root.find(syms["b"]) is None
    assert child.root() is root


def test_inner_frame_shadows_outer(syms):
    root = Environment()
    root.add(syms["a"], Integer(1))
    child = Environment(root)
    child.add(syms["a"], Integer(10))
    assert child.find(syms["a"]).value == 10
    assert root.find(syms["a"]).value == 1


def test_binding_slot_is_mutable(syms):
    env = Environment()
    env.add(syms["a"], Integer(1))
    env.find(syms["a"]).value = Integer(5)
    assert env.find(syms["a"]).value == 5


def test_push_frame_binds_positional(rt, syms):
    params = rt.make_list([syms["a"], syms["b"]])
    frame = push_frame(Environment(), params, rt.make_list([Integer(1), Integer(2)]))
    assert frame.find(syms["a"]).value == 1
    assert frame.find(syms["b"]).value == 2


def test_push_frame_rest_parameter(rt, syms):
    params = rt.make_list([syms["a"]], syms["rest"])
    frame = push_frame(Environment(), params, rt.make_list([Integer(1), Integer(2), Integer(3)]))
    assert frame.find(syms["a"]).value == 1
    assert list(frame.find(syms["rest"]).value) == [2, 3]


def test_push_frame_empty_rest(rt, syms):
    params = rt.make_list([syms["a"]], syms["rest"])
    frame = push_frame(Environment(), params, rt.make_list([Integer(1)]))
    assert frame.find(syms["rest"]).value is rt.nil


def test_push_frame_bare_symbol_takes_all(rt, syms):
    frame = push_frame(Environment(), syms["rest"], rt.make_list([Integer(1)]))
    assert list(frame.find(syms["rest"]).value) == [1]


def test_push_frame_too_few_arguments(rt, syms):
    params = rt.make_list([syms["a"], syms["b"]])
    with pytest.raises(LispArityError):
        push_frame(Environment(), params, rt.make_list([Integer(1)]))


def test_push_frame_ignores_extra_arguments(rt, syms):
    params = rt.make_list([syms["a"]])
    frame = push_frame(Environment(), params, rt.make_list([Integer(1), Integer(2)]))
    assert frame.find(syms["a"]).value == 1
    assert len(frame.bindings) == 1


def test_push_frame_strict_arity_rejects_extra_arguments(rt, syms):
    params = rt.make_list([syms["a"]])
    with pytest.raises(LispArityError):
        push_frame(Environment(), params, rt.make_list([Integer(1), Integer(2)]), strict_arity=True)


def test_push_frame_parent(rt):
    parent = Environment()
    frame = push_frame(parent, rt.nil, rt.nil)
    assert frame.parent is parent
    assert frame.bindings == []
