import pytest
from hypothesis import given, strategies as st

from jack.errors import JackSyntaxError
from jack.reader.parser import LITERALS, TokenStream, lex, parse
from jack.types.symbol import Form, Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("(add 1 2)", [("lparen", "("), ("atom", "add"), ("atom", "1"), ("atom", "2"), ("rparen", ")")]),
        ("[a b]", [("lbracket", "["), ("atom", "a"), ("atom", "b"), ("rbracket", "]")]),
        ('"hello"', [("string", "hello")]),
        ('"say \\"hi\\""', [("string", 'say "hi"')]),
        ("@tag", [("form", "@tag")]),
        (" ; comment\n a b", [("atom", "a"), ("atom", "b")]),
        ("a;trailing", [("atom", "a")]),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("none", None),
        ("true", True),
        ("false", False),
        ("123", 123),
        ("-45", -45),
        ("3.14", 3.14),
        ("1e3", 1000.0),
        ('"hello"', "hello"),
        ('"line\\nbreak"', "line\nbreak"),
        ("name", Symbol("name")),
        ("@meta", Form("meta")),
        ("(add 1 2)", [Form("add"), 1, 2]),
        ("(print)", [Form("print")]),
        ("()", []),
        ("[a b]", [Symbol("a"), Symbol("b")]),
        ("[]", []),
        ("(if c [(call f)] [1])", [Form("if"), Symbol("c"), [[Form("call"), Symbol("f")]], [1]]),
    ]
)
def test_parser(source, expected):
    stream = TokenStream(lex(source))
    result = list(stream.parse_all())
    assert result[0] == expected     # Parser yields one expression


def test_operation_heads_are_forms_not_symbols():
    node = parse("(add x 1)")[0]
    assert node[0] is Form("add")
    assert node[1] is Symbol("x")


def test_nested_operations():
    source = "(add (mul 2 3) (sub 4 1))"
    expected = [Form("add"), [Form("mul"), 2, 3], [Form("sub"), 4, 1]]
    assert parse(source) == [expected]


def test_multiple_top_level_nodes():
    assert parse("(vars x) (assign x 1) x") == [
        [Form("vars"), Symbol("x")],
        [Form("assign"), Symbol("x"), 1],
        Symbol("x"),
    ]


@pytest.mark.parametrize(
    "source",
    [
        "",             # empty string
        "    ",         # spaces only
        "; comment",    # comment only
    ]
)
def test_empty_sources(source):
    assert parse(source) == []


@pytest.mark.parametrize(
    "source",
    [
        "(add 1",
        "(add 1))",
        "[a b",
        "(add 1]",
        ")",
        "(1 2)",
        '("add" 1)',
        "([a] 1)",
        '"unterminated',
    ]
)
def test_syntax_errors(source):
    with pytest.raises(JackSyntaxError):
        parse(source)


def test_syntax_error_reports_position():
    with pytest.raises(JackSyntaxError) as excinfo:
        list(lex('ab "open'))
    assert excinfo.value.position == 3


@pytest.mark.parametrize(
    "source, position",
    [
        ('"a\nb"', 0),
        ('(print "\\x")', 7),
        ('x "\\N{no such name}"', 2),
    ]
)
def test_invalid_string_literals(source, position):
    with pytest.raises(JackSyntaxError) as excinfo:
        parse(source)
    assert excinfo.value.position == position


# -------------------------------
# Helpers
# -------------------------------
def _escape_string(s: str) -> str:
    escaped = s.encode('unicode_escape').decode('ascii')
    escaped = escaped.replace('"', '\\"')
    return f'"{escaped}"'


# -------------------------------
# Strategies
# -------------------------------
name_strat = st.text(
    st.characters(whitelist_categories=("Ll", "Lu"), whitelist_characters="-_?!"),
    min_size=1, max_size=10
).filter(lambda s: s not in LITERALS)

string_strat = st.text(st.characters(min_codepoint=32, max_codepoint=126), max_size=20)


@given(st.integers(min_value=-10**6, max_value=10**6))
def test_integer_literals_read_back(n):
    assert parse(str(n)) == [n]


@given(string_strat)
def test_string_literals_read_back(s):
    assert parse(_escape_string(s)) == [s]


@given(name_strat)
def test_names_read_as_interned_symbols(name):
    (node,) = parse(name)
    assert node is Symbol(name)


@given(name_strat, st.lists(st.integers(min_value=0, max_value=99), max_size=5))
def test_operation_nodes_read_back(name, args):
    source = f"({name} {' '.join(map(str, args))})"
    assert parse(source) == [[Form(name), *args]]
