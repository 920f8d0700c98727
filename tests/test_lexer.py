import pytest
from hypothesis import given
from hypothesis import strategies as st

from intcalc.intcalc_errors import ParseError
from intcalc.intcalc_lexer import Cursor, Lexer, Token, tokenize


def test_cursor_rest_and_col() -> None:
    cursor = Cursor("12 + 3", 3)
    assert cursor.rest == "+ 3"
    assert cursor.col == 4
    assert cursor.peek() == "+"
    assert cursor.peek(10) == ""


def test_cursor_advance_returns_new_cursor() -> None:
    cursor = Cursor("abc")
    moved = cursor.advance(2)
    assert cursor.position == 0
    assert moved.position == 2
    assert moved.rest == "c"


def test_cursor_advance_past_end_raises() -> None:
    with pytest.raises(ValueError):
        Cursor("a").advance(2)


def test_cursor_rejects_bad_position() -> None:
    with pytest.raises(ValueError):
        Cursor("a", 5)


def test_cursor_end_of_file() -> None:
    assert Cursor("").end_of_file()
    assert Cursor("x", 1).end_of_file()
    assert not Cursor("x").end_of_file()


def test_cursor_equality_and_hash() -> None:
    assert Cursor("1+2", 1) == Cursor("1+2", 1)
    assert Cursor("1+2", 1) != Cursor("1+2", 2)
    assert len({Cursor("1+2", 1), Cursor("1+2", 1)}) == 1


def test_token_equality() -> None:
    assert Token("PLUS", "+", 3) == Token("PLUS", "+", 3)
    assert Token("PLUS", "+", 3) != Token("PLUS", "+", 4)
    assert repr(Token("NUMBER", "-4")) == "Token(NUMBER, -4)"


def test_skip_whitespace_spaces_and_tabs() -> None:
    lexer = Lexer()
    assert lexer.skip_whitespace(Cursor(" \t 7")).rest == "7"
    assert lexer.skip_whitespace(Cursor("7 ")).rest == "7 "


def test_skip_whitespace_to_end() -> None:
    lexer = Lexer()
    assert lexer.skip_whitespace(Cursor("   ")).end_of_file()


def test_scan_digits() -> None:
    digits, rest = Lexer().scan_digits(Cursor("0042x"))
    assert digits == "0042"
    assert rest.rest == "x"


def test_scan_digits_requires_one_digit() -> None:
    with pytest.raises(ParseError) as exc:
        Lexer().scan_digits(Cursor("x1"))
    assert exc.value.position == 0
    assert exc.value.expected == "digit"


def test_scan_digits_ascii_only() -> None:
    with pytest.raises(ParseError):
        Lexer().scan_digits(Cursor("٣"))  # ARABIC-INDIC DIGIT THREE


def test_read_integer_with_sign_and_spaces() -> None:
    tok, rest = Lexer().read_integer(Cursor("  -  42  * 2"))
    assert tok == Token("NUMBER", "-42", 3)
    assert rest.rest == "* 2"


def test_read_integer_plain() -> None:
    tok, rest = Lexer().read_integer(Cursor("537  "))
    assert tok.value == "537"
    assert rest.end_of_file()


def test_read_integer_sign_without_digits_fails() -> None:
    with pytest.raises(ParseError) as exc:
        Lexer().read_integer(Cursor(" -(1)"))
    assert exc.value.position == 2


def test_read_integer_single_sign_only() -> None:
    with pytest.raises(ParseError):
        Lexer().read_integer(Cursor("--1"))


def test_read_sign() -> None:
    lexer = Lexer()
    assert lexer.read_sign(Cursor(" - (")) == (True, Cursor(" - (", 3))
    assert lexer.read_sign(Cursor(" (")) == (False, Cursor(" (", 1))


def test_match_char() -> None:
    tok, rest = Lexer().match_char(Cursor("(1)"), "(")
    assert tok == Token("LPAREN", "(", 1)
    assert rest.rest == "1)"


def test_match_char_does_not_skip_whitespace() -> None:
    with pytest.raises(ParseError):
        Lexer().match_char(Cursor(" )"), ")")


@pytest.mark.parametrize(  # type: ignore[misc]
    "source,allowed,expected",
    [
        ("+1", ("PLUS", "SUB"), "PLUS"),
        ("-1", ("PLUS", "SUB"), "SUB"),
        ("*1", ("MULT", "DIV"), "MULT"),
        ("/1", ("MULT", "DIV"), "DIV"),
    ],
)
def test_match_operator(source: str, allowed: tuple[str, ...], expected: str) -> None:
    tok, rest = Lexer().match_operator(Cursor(source), allowed)
    assert tok.type == expected
    assert rest.rest == "1"


@pytest.mark.parametrize("source", ["*1", "(", "", " +"])  # type: ignore[misc]
def test_match_operator_rejects(source: str) -> None:
    with pytest.raises(ParseError):
        Lexer().match_operator(Cursor(source), ("PLUS", "SUB"))


def test_tokenize() -> None:
    types = [tok.type for tok in tokenize(" 2*(3 + -4) / 5")]
    assert types == [
        "NUMBER",
        "MULT",
        "LPAREN",
        "NUMBER",
        "PLUS",
        "SUB",
        "NUMBER",
        "RPAREN",
        "DIV",
        "NUMBER",
    ]


def test_tokenize_columns() -> None:
    tokens = tokenize("12 + 3")
    assert [tok.col for tok in tokens] == [1, 4, 6]


def test_tokenize_rejects_unknown_character() -> None:
    with pytest.raises(ParseError) as exc:
        tokenize("1 + x")
    assert exc.value.col == 5


@given(st.integers(min_value=0, max_value=10**30))  # type: ignore[misc]
def test_scan_digits_reads_any_digit_run(n: int) -> None:
    digits, rest = Lexer().scan_digits(Cursor(str(n)))
    assert int(digits) == n
    assert rest.end_of_file()
