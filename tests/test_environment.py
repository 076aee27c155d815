import pytest

from jack.errors import JackUnboundName
from jack.types import Environment, Symbol


@pytest.fixture
def root():
    e = Environment()
    e.define("x", 1)
    return e


def test_lookup_walks_outward(root):
    child = root.spawn().spawn()
    assert child.lookup("x") == 1
    assert child.find("x") is root


def test_declared_name_shadows_ancestor_on_read(root):
    child = root.spawn()
    child.declare_vars(["x"])
    assert child.lookup("x") is None
    assert root.lookup("x") == 1


def test_assign_without_declaration_mutates_ancestor(root):
    child = root.spawn()
    assert child.assign("x", 5) == 5
    assert root.lookup("x") == 5
    assert "x" not in child.vars


def test_assign_writes_nearest_owner_only(root):
    middle = root.spawn()
    middle.declare_vars(["x"])
    leaf = middle.spawn()
    leaf.assign("x", 9)
    assert middle.lookup("x") == 9
    assert root.lookup("x") == 1


def test_unbound_names_are_errors(root):
    with pytest.raises(JackUnboundName):
        root.lookup("missing")
    with pytest.raises(JackUnboundName):
        root.spawn().assign("missing", 1)


def test_params_bind_by_position():
    frame = Environment().spawn(arguments=(10, 20))
    frame.declare_params(["a", "b", "c"])
    assert frame.lookup("a") == 10
    assert frame.lookup("b") == 20
    assert frame.lookup("c") is None


def test_symbols_and_strings_name_the_same_binding(root):
    root.define(Symbol("y"), 3)
    assert root.lookup("y") == 3
    root.assign(Symbol("x"), 4)
    assert root.lookup(Symbol("x")) == 4


def test_repr(root):
    leaf = root.spawn().spawn()
    assert "x: 1" in repr(leaf)
    assert str(root) == "{x: 1}"
    assert str(leaf).endswith("-> ...")
