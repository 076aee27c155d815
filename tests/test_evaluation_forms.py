import pytest

from jack.errors import JackUnknownPredicate
from jack.evaluation.evaluator import run
from jack.reader.parser import parse
from jack.types import Form, KeyedObject, List, Symbol, Tuple

F, S = Form, Symbol


def run_source(source, env):
    result = None
    for node in parse(source):
        result = run(node, env)
    return result


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(add 1 2)", 3),
        ("(sub 10 3)", 7),
        ("(mul 6 7)", 42),
        ("(div 7 2)", 3.5),
        ("(pow 2 10)", 1024),
        ("(mod 7 3)", 1),
        ("(unm 5)", -5),
        ("(add (mul 2 3) (sub 10 4))", 12),
        ('(add "ab" "cd")', "abcd"),
        ("(le 2 2)", True),
        ("(lt 2 2)", False),
        ("(ge 3 2)", True),
        ("(gt 2 3)", False),
        ("(eq 1 1)", True),
        ('(eq "a" "a")', True),
        ("(neq 1 2)", True),
        ("(neq none none)", False),
        ("(eq 1 true)", False),
        ("(eq 0 false)", False),
        ("(eq true true)", True),
        ("(eq 1 1.0)", True),
        ("(neq 1 true)", True),
        ("(neq false 0)", True),
    ],
)
def test_operators(source, expected, env):
    assert run_source(source, env) == expected


def test_division_by_zero_is_a_host_error(env):
    with pytest.raises(ZeroDivisionError):
        run_source("(div 1 0)", env)


# -----------------------------------------------------
# Logic
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(or 0 5)", 5),
        ("(or 3 5)", 3),
        ("(and 0 5)", 0),
        ("(and 3 5)", 5),
        ("(xor true false)", True),
        ("(xor 1 2)", False),
        ("(not 0)", True),
        ("(not (list 1))", False),
    ],
)
def test_logic(source, expected, env):
    assert run_source(source, env) == expected


def test_or_evaluates_second_operand_even_when_first_decides(env, calls):
    assert run_source('(or true (call note "side"))', env) is True
    assert calls == ["side"]


def test_and_evaluates_second_operand_even_when_first_decides(env, calls):
    assert run_source('(and false (call note "side"))', env) is False
    assert calls == ["side"]


def test_in(env):
    assert run_source('(in (object "a" 1) "a")', env) is True
    assert run_source('(in (object "a" 1) "b")', env) is False
    assert run_source("(in (list 5 6) 1)", env) is True
    assert run_source("(in (list 5 6) 2)", env) is False
    assert run_source('(in "text" "t")', env) is False


# -----------------------------------------------------
# Collections
# -----------------------------------------------------

def test_list_and_tuple_constructors(env):
    lst = run_source("(list 1 (add 1 1) 3)", env)
    tup = run_source("(tuple 1 2)", env)
    assert isinstance(lst, List) and lst == [1, 2, 3]
    assert isinstance(tup, Tuple) and list(tup) == [1, 2]


def test_tuple_has_fixed_length(env):
    tup = run_source("(tuple 1 2)", env)
    tup[0] = 5
    assert tup == [5, 2]
    with pytest.raises(TypeError):
        tup.append(3)
    with pytest.raises(TypeError):
        del tup[0]


def test_object_keeps_first_insertion_order(env):
    obj = run_source('(object "a" 1 "b" 2 "a" 3)', env)
    assert isinstance(obj, KeyedObject)
    assert list(obj.items()) == [("a", 3), ("b", 2)]


def test_object_accepts_symbol_values_as_keys(env):
    env.define("key", Symbol("k"))
    obj = run_source("(object key 1)", env)
    assert obj[Symbol("k")] == 1


def test_len_get_set_delete(env):
    env.define("o", KeyedObject())
    assert run_source('(set o "x" 10)', env) == 10
    assert run_source('(get o "x")', env) == 10
    assert run_source("(len o)", env) == 1
    run_source('(delete o "x")', env)
    assert run_source("(len o)", env) == 0
    assert run_source('(get o "x")', env) is None


def test_form_keys_reach_meta_slots(env):
    env.define("o", KeyedObject(a=1))
    run_source('(set o @tag "meta")', env)
    assert run_source("(get o @tag)", env) == "meta"
    assert run_source("(len o)", env) == 1


def test_sequence_index_access(env):
    env.define("l", List([1, 2, 3]))
    assert run_source("(get l 2)", env) == 3
    run_source("(set l 0 9)", env)
    run_source("(delete l 1)", env)
    assert env.lookup("l") == [9, 3]


def test_sequence_writes_outside_the_elements_are_ignored(env):
    env.define("l", List([1, 2, 3]))
    assert run_source("(set l -1 9)", env) is None
    assert run_source("(get l -1)", env) is None
    assert run_source('(set (tuple 1 2) 2 5)', env) is None
    assert env.lookup("l") == [1, 2, 3]


def test_string_keys_on_lists_are_members(env):
    env.define("l", List([1, 2]))
    assert run_source('(set l "x" 5)', env) == 5
    assert run_source('(get l "x")', env) == 5
    assert run_source("(len l)", env) == 2


def test_division_results_index_sequences(env):
    assert run_source("(get (list 10 20 30) (div 2 2))", env) == 20


# -----------------------------------------------------
# Type predicates
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(is (tuple 1 2) Tuple)", True),
        ("(is (list 1 2) Tuple)", False),
        ("(is (list 1 2) List)", True),
        ("(is (tuple 1 2) List)", False),
        ('(is (tuple 1 2) "Tuple")', True),
        ("(is 5 Integer)", True),
        ("(is -1 Integer)", False),
        ("(is 1.5 Integer)", False),
        ("(is (div 6 2) Integer)", True),
        ("(is (div 7 2) Integer)", False),
        ("(is true Integer)", False),
        ("(is none Null)", True),
        ("(is 0 Null)", False),
        ("(is false Boolean)", True),
        ('(is "s" String)', True),
        ("(is (fn) Function)", True),
        ("(is print Function)", True),
        ("(is (object) Object)", True),
        ("(is (list) Object)", False),
    ],
)
def test_predicates(source, expected, env):
    assert run_source(source, env) is expected


def test_buffer_predicate(env):
    env.define("blob", b"\x00\x01")
    assert run_source("(is blob Buffer)", env) is True
    assert run_source('(is "x" Buffer)', env) is False


def test_host_dict_is_not_a_keyed_object(env):
    env.define("d", {"a": 1})
    assert run_source("(is d Object)", env) is False


def test_unknown_predicate(env):
    with pytest.raises(JackUnknownPredicate):
        run_source("(is 1 Float)", env)
