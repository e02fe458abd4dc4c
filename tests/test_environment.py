import dataclasses

import pytest

from lithp.errors import LithpShapeError, LithpUndefinedSymbol
from lithp.types.environment import Environment
from lithp.types.symbol import Symbol


@pytest.fixture
def outer():
    e = Environment()
    e.define(Symbol("x"), 1.0)
    e.define(Symbol("y"), 2.0)
    return e


def test_lookup_local_and_outer(outer):
    inner = Environment(outer)
    inner.define(Symbol("z"), 3.0)
    assert inner.lookup(Symbol("z")) == 3.0
    assert inner.lookup(Symbol("x")) == 1.0
    assert inner.find(Symbol("x")) is outer
    assert inner.find(Symbol("z")) is inner


def test_lookup_missing_raises(outer):
    inner = Environment(outer)
    with pytest.raises(LithpUndefinedSymbol) as exc_info:
        inner.lookup(Symbol("nope"))
    assert exc_info.value.name == Symbol("nope")


def test_get_returns_default_on_miss(outer):
    assert outer.get(Symbol("nope")) is None
    assert outer.get(Symbol("nope"), 0.0) == 0.0
    assert outer.get(Symbol("y")) == 2.0


def test_define_returns_previous_local_value(outer):
    assert outer.define(Symbol("w"), 5.0) is None
    assert outer.define(Symbol("w"), 6.0) == 5.0
    assert outer.lookup(Symbol("w")) == 6.0


def test_define_only_touches_local_frame(outer):
    inner = Environment(outer)
    # x is bound in the outer frame, but not locally
    assert inner.define(Symbol("x"), 99.0) is None
    assert inner.lookup(Symbol("x")) == 99.0
    assert outer.lookup(Symbol("x")) == 1.0


def test_define_requires_symbol(outer):
    with pytest.raises(LithpShapeError):
        outer.define("x", 1.0)


def test_siblings_share_parent(outer):
    a = Environment(outer)
    b = Environment(outer)
    outer.define(Symbol("late"), 7.0)
    assert a.lookup(Symbol("late")) == 7.0
    assert b.lookup(Symbol("late")) == 7.0
    a.define(Symbol("only_a"), 1.0)
    assert Symbol("only_a") not in b
    assert Symbol("only_a") in a


def test_root_and_chain(outer):
    inner = Environment(Environment(outer))
    assert inner.root() is outer
    assert list(inner.chain())[-1] is outer
    assert len(list(inner.chain())) == 3


def test_update_defines_in_bulk():
    e = Environment()
    e.update({Symbol("a"): 1.0, Symbol("b"): 2.0})
    assert e.lookup(Symbol("a")) == 1.0
    assert e.lookup(Symbol("b")) == 2.0


def test_str_and_repr(outer):
    inner = Environment(outer)
    inner.define(Symbol("z"), 3.0)
    assert str(inner) == "{z: 3.0} -> ..."
    assert repr(inner).startswith("<Environment chain: {z: 3.0} -> ")


def test_repr_of_frame_holding_its_own_closure(env, run):
    run("(define f (lambda (n) n))")
    # The closure captures the frame it is stored in; rendering must terminate
    assert "<procedure (n)>" in str(env)


def test_symbols_compare_by_name():
    assert Symbol("a") == Symbol("a")
    assert Symbol("a") != Symbol("b")
    assert Symbol("a") != "a"
    assert hash(Symbol("a")) == hash(Symbol("a"))
    assert str(Symbol("a")) == "a"


def test_symbols_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Symbol("a").name = "b"
