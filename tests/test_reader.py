import pytest
from hypothesis import given, strategies as st

from cata.reader.parser import Reader, parse, parse_one
from cata.types.errors import (
    CataSyntaxError,
    InvalidEscapeSequence,
    MissingCloseParen,
    NewlineInString,
    RecursionLimitExceeded,
    UnterminatedString,
)
from cata.types.node import IntegerNode, ListNode, StringNode, SymbolNode, format_node
from cata.types.position import Position


def L(*items):
    return ListNode(tuple(items))


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(+ 1 2)", L(SymbolNode("+"), IntegerNode(1), IntegerNode(2))),
        ("foo", SymbolNode("FOO")),
        ("FOO", SymbolNode("FOO")),
        ("Print-String", SymbolNode("PRINT-STRING")),
        ("42", IntegerNode(42)),
        ("007", IntegerNode(7)),
        ("-1", SymbolNode("-1")),
        ("12abc", SymbolNode("12ABC")),
        ('"hello"', StringNode("hello")),
        ('""', StringNode("")),
        ('"a\\nb"', StringNode("a\nb")),
        ('"say \\"hi\\""', StringNode('say "hi"')),
        ('"(not a list)"', StringNode("(not a list)")),
        ("()", L()),
        ("((a) (b c))", L(L(SymbolNode("A")), L(SymbolNode("B"), SymbolNode("C")))),
    ],
)
def test_parse_one(source, expected):
    assert parse_one(source) == expected


def test_escaped_newline_shrinks_string():
    node = parse_one('"a\\nb"')
    assert node.text == "a\nb"
    assert len(node.text) == 3


def test_symbols_are_case_normalized():
    assert parse("foo") == parse("FOO") == parse("fOo")


def test_only_ascii_letters_are_upcased():
    assert parse_one("straße") == SymbolNode("STRAßE")


def test_whitespace_between_forms():
    forms = parse(" \t(a\r\n b)\n\n\t42 ")
    assert forms == [L(SymbolNode("A"), SymbolNode("B")), IntegerNode(42)]


def test_atoms_end_at_parens():
    assert parse_one("(a(b)c)") == L(SymbolNode("A"), L(SymbolNode("B")), SymbolNode("C"))


def test_reading_stops_at_unmatched_close_paren():
    assert parse(")") == []
    assert parse("(a)) b") == [L(SymbolNode("A"))]
    assert parse("1 2 ) (unclosed") == [IntegerNode(1), IntegerNode(2)]


def test_parse_one_rejects_close_paren():
    with pytest.raises(CataSyntaxError):
        parse_one(")")


def test_empty_source_has_no_forms():
    assert parse("") == []
    assert parse("  \n\t ") == []


@pytest.mark.parametrize(
    "source, value",
    [
        ("2147483647", 2147483647),
        ("2147483648", -2147483648),
        ("4294967296", 0),
        ("4294967297", 1),
    ],
)
def test_integers_wrap_to_32_bits(source, value):
    assert parse_one(source) == IntegerNode(value)


# ------------------ Errors ------------------


@pytest.mark.parametrize(
    "source, error",
    [
        ('"abc', UnterminatedString),
        ('"abc\\', UnterminatedString),
        ('"a\\qb"', InvalidEscapeSequence),
        ('"a\\\\"', InvalidEscapeSequence),
        ('"a\\t"', InvalidEscapeSequence),
        ('"a\nb"', NewlineInString),
        ('"a\\\nb"', NewlineInString),
        ("(a b", MissingCloseParen),
        ("((a b)", MissingCloseParen),
    ],
)
def test_syntax_errors(source, error):
    with pytest.raises(error):
        parse(source)


def test_syntax_errors_share_a_base_class():
    with pytest.raises(CataSyntaxError):
        parse('"never closed')


def test_unterminated_string_wins_over_bad_escape():
    with pytest.raises(UnterminatedString):
        parse('"a\\q')


def test_unterminated_string_reports_opening_quote():
    with pytest.raises(UnterminatedString) as info:
        parse('(a\n  "x')
    assert info.value.position == Position(5, 2, 3)
    assert "2:3" in str(info.value)


def test_missing_paren_reports_opening_paren():
    with pytest.raises(MissingCloseParen) as info:
        parse("  (a")
    assert info.value.position == Position(2, 1, 3)


def test_bad_escape_reports_backslash():
    with pytest.raises(InvalidEscapeSequence) as info:
        parse('"ab\\x"')
    assert info.value.position.column == 4


def test_parse_one_rejects_trailing_input():
    with pytest.raises(CataSyntaxError):
        parse_one("a b")


def test_parse_one_rejects_empty_input():
    with pytest.raises(CataSyntaxError):
        parse_one("   ")


def test_nesting_limit():
    source = "(" * 5 + ")" * 5
    assert len(parse(source, max_depth=5)) == 1
    with pytest.raises(RecursionLimitExceeded):
        parse(source, max_depth=4)


def test_reader_parse_list_stops_at_close_paren():
    reader = Reader("a b) c")
    assert reader.parse_list() == [SymbolNode("A"), SymbolNode("B")]
    assert reader.peek() == ")"


def test_nodes_remember_positions():
    node = parse_one("(a\n bc)")
    assert node.position == Position(0, 1, 1)
    assert node.items[1].position == Position(4, 2, 2)


# ------------------ Printing ------------------


@pytest.mark.parametrize(
    "source, printed",
    [
        ("(+ 1 2)", "(+ 1 2)"),
        ("(print-string   \"hi\")", '(PRINT-STRING "hi")'),
        ('"say \\"hi\\"\\n"', '"say \\"hi\\"\\n"'),
        ("(let (x 5) ( ))", "(LET (X 5) ())"),
    ],
)
def test_format_node(source, printed):
    assert format_node(parse_one(source)) == printed


_symbol_chars = st.sampled_from("abcxyzABCXYZ0123456789+-*/=<>!?_")
symbols = st.text(_symbol_chars, min_size=1, max_size=8).filter(
    lambda s: not s.isdigit()
).map(SymbolNode)
strings = st.text(
    st.characters(exclude_characters="\\", exclude_categories=("Cs",)), max_size=12
).map(StringNode)
integers = st.integers(min_value=0, max_value=2**31 - 1).map(IntegerNode)
nodes = st.recursive(
    symbols | strings | integers,
    lambda children: st.lists(children, max_size=5).map(lambda xs: ListNode(tuple(xs))),
    max_leaves=20,
)


@given(nodes)
def test_printed_nodes_read_back_equal(node):
    assert parse_one(format_node(node)) == node


@given(st.text("0123456789", min_size=1, max_size=9))
def test_digit_runs_are_integers(text):
    assert parse_one(text) == IntegerNode(int(text))
