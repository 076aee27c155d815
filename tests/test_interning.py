import pickle

import pytest
from hypothesis import given, strategies as st

from jack.types.symbol import Form, Symbol, Interner, INTERNER, intern

names = st.text(min_size=1, max_size=20)


@given(names)
def test_form_interning_is_identity(name):
    assert Form(name) is Form(name)


@given(names)
def test_symbol_interning_is_identity(name):
    assert Symbol(name) is Symbol(name)


@given(names)
def test_form_and_symbol_namespaces_never_collide(name):
    assert Form(name) is not Symbol(name)
    assert Form(name) != Symbol(name)


def test_generic_intern_contract():
    assert intern("form", "add") is Form("add")
    assert intern("symbol", "x") is Symbol("x")
    with pytest.raises(ValueError):
        intern("keyword", "x")


def test_default_interner_backs_constructors():
    f = Form("interned-probe")
    assert INTERNER.forms["interned-probe"] is f
    assert INTERNER.form("interned-probe") is f


def test_separate_interner_keeps_its_own_tables():
    interner = Interner()
    assert len(interner) == 0
    a = interner.form("x")
    assert interner.form("x") is a
    assert interner.symbol("x") is not a
    assert len(interner) == 2


def test_names_must_be_strings():
    with pytest.raises(TypeError):
        Form(3)
    with pytest.raises(TypeError):
        Symbol(None)


def test_symbols_are_usable_as_mapping_keys():
    table = {Symbol("k"): 1}
    assert table[Symbol("k")] == 1
    assert Symbol("other") not in table


def test_repr_and_name():
    assert repr(Form("add")) == "@add"
    assert repr(Symbol("x")) == ":x"
    assert Form("add").name == "add"
    assert str(Symbol("x")) == "x"


def test_pickle_preserves_identity():
    assert pickle.loads(pickle.dumps(Symbol("p"))) is Symbol("p")
    assert pickle.loads(pickle.dumps(Form("p"))) is Form("p")
