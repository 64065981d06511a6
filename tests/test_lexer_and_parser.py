import pytest
from hypothesis import given, strategies as st

from sprig.errors import SprigParseError
from sprig.reader.lexer import tokenize
from sprig.reader.parser import TokenStream, parse, parse_atom, parse_source
from sprig.types.node import (
    BoolNode,
    ComplexNode,
    FloatNode,
    IntNode,
    ListNode,
    StringNode,
    SymbolNode,
)


def S(name):
    return SymbolNode(name)


def L(*items):
    return ListNode(items)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("(a b c)", [("lparen", "("), ("atom", "a"), ("atom", "b"), ("atom", "c"), ("rparen", ")")]),
        ("(+ 1 2)", [("lparen", "("), ("atom", "+"), ("atom", "1"), ("atom", "2"), ("rparen", ")")]),
        ('"hello"', [("string", "hello")]),
        ('"say \\"hi\\""', [("string", 'say "hi"')]),
        (" ; comment\n a b", [("atom", "a"), ("atom", "b")]),
        ("'x", [("lparen", "("), ("atom", "quote"), ("atom", "x"), ("rparen", ")")]),
        ("'(a b)", [("lparen", "("), ("atom", "quote"), ("lparen", "("), ("atom", "a"),
                    ("atom", "b"), ("rparen", ")"), ("rparen", ")")]),
        ("(f 'x y)", [("lparen", "("), ("atom", "f"), ("lparen", "("), ("atom", "quote"),
                      ("atom", "x"), ("rparen", ")"), ("atom", "y"), ("rparen", ")")]),
        ("''a", [("lparen", "("), ("atom", "quote"), ("lparen", "("), ("atom", "quote"),
                 ("atom", "a"), ("rparen", ")"), ("rparen", ")")]),
        ("#t #f", [("atom", "#t"), ("atom", "#f")]),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(tokenize(source, extended=True)) == expected


def test_basic_dialect_has_no_strings():
    assert list(tokenize('"hi"', extended=False)) == [("atom", '"hi"')]


def test_unterminated_string_is_a_parse_error():
    with pytest.raises(SprigParseError):
        list(tokenize('(print "oops)', extended=True))


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", IntNode(123)),
        ("-45", IntNode(-45)),
        ("+7", IntNode(7)),
        ("3.14", FloatNode(3.14)),
        ("1e3", FloatNode(1000.0)),
        (".5", FloatNode(0.5)),
        ("2147483648", FloatNode(2147483648.0)),
        ("#t", BoolNode(True)),
        ("#f", BoolNode(False)),
        ("foo", S("foo")),
        ("+", S("+")),
        ("-", S("-")),
        ("set!", S("set!")),
        ("1+2i", ComplexNode(1.0, 2.0)),
        ("1.5-2.5i", ComplexNode(1.5, -2.5)),
        ("+i", ComplexNode(0.0, 1.0)),
        ("-i", ComplexNode(0.0, -1.0)),
        ("3-i", ComplexNode(3.0, -1.0)),
        ("-2i", ComplexNode(0.0, -2.0)),
        ('"text"', StringNode("text")),
        ("(a b c)", L(S("a"), S("b"), S("c"))),
        ("(1 (2 3))", L(IntNode(1), L(IntNode(2), IntNode(3)))),
        ("()", L()),
        ("'a", L(S("quote"), S("a"))),
    ]
)
def test_parser(source, expected):
    assert parse_source(source, extended=True) == expected


def test_basic_dialect_reads_complex_shapes_as_symbols():
    assert parse_source("1+2i", extended=False) == S("1+2i")


def test_nested_lists():
    node = parse_source("(define (sq x) (* x x))", extended=True)
    assert node == L(S("define"), L(S("sq"), S("x")), L(S("*"), S("x"), S("x")))
    assert str(node) == "(define (sq x) (* x x))"


@pytest.mark.parametrize(
    "source,message",
    [
        ("", "Empty input"),
        ("   ; only a comment", "Empty input"),
        ("(1 2", "Unexpected end of input"),
        (")", "Unexpected close paren"),
        ("1 2", "Only one outer level permitted"),
        ("(a) (b)", "Only one outer level permitted"),
        (".+i", "Error parsing complex constant .+i"),
    ]
)
def test_parse_errors(source, message):
    with pytest.raises(SprigParseError) as excinfo:
        parse_source(source, extended=True)
    assert str(excinfo.value) == message


def test_token_stream_yields_every_form():
    stream = TokenStream(tokenize("1 (a) #t", extended=True), extended=True)
    assert list(stream.parse_all()) == [IntNode(1), L(S("a")), BoolNode(True)]


def test_parse_accepts_any_token_iterable():
    assert parse([("atom", "x")], extended=True) == S("x")


@given(st.integers(min_value=-(2 ** 31), max_value=2 ** 31 - 1))
def test_int_atoms(n):
    assert parse_atom(str(n)) == IntNode(n)


symbol_strat = st.text(
    st.characters(categories=("Ll", "Lu"), include_characters="?!*<>="),
    min_size=1,
    max_size=10,
)


@given(st.lists(symbol_strat, max_size=6))
def test_flat_symbol_lists_parse(names):
    source = "(" + " ".join(names) + ")"
    assert parse_source(source, extended=True) == ListNode(tuple(SymbolNode(n) for n in names))
