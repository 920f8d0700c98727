"""
Character-level scanning for intcalc expressions.

This module provides the pieces the parser builds on:

Classes:
    Cursor: Immutable position in a source string. Advancing returns a new cursor.
    Token: A single lexeme with type, raw value, and source column.
    Lexer: Stateless scanning rules (whitespace, operators, integer literals)
        that take a Cursor and return a Token plus the advanced Cursor.

Features:
    - Skips spaces and tabs around every token
    - Recognizes single-character operators and parentheses via `token_hashmap`
    - Reads optionally signed decimal integer literals (`-` may be followed by spaces)

Raises:
    ParseError: When the expected token is not found at the cursor.

Example:
    >>> lexer = Lexer()
    >>> tok, rest = lexer.read_integer(Cursor(" - 42 * 2"))
    >>> tok
    Token(NUMBER, -42)
    >>> rest.rest
    '* 2'
"""

from __future__ import annotations

from typing import Any

from intcalc.intcalc_constants import DIGITS, WHITESPACE, token_hashmap
from intcalc.intcalc_errors import ParseError


class Cursor:
    """
    An immutable view over the unconsumed part of a source string.

    Attributes:
        source (str): The full input text.
        position (int): Index of the first unconsumed character.
    """

    def __init__(self, source: str, position: int = 0):
        if position < 0 or position > len(source):
            raise ValueError(
                f"Cursor position {position} out of range for source of length {len(source)}"
            )
        self.source = source
        self.position = position

    @property
    def rest(self) -> str:
        """The unconsumed suffix of the source."""
        return self.source[self.position :]

    @property
    def col(self) -> int:
        """1-based column of the cursor."""
        return self.position + 1

    def peek(self, offset: int = 0) -> str:
        """
        Returns the character at the given offset from the cursor without advancing.

        Args:
            offset (int, optional): Number of characters to look ahead. Defaults to 0.

        Returns:
            str: The character at the offset, or an empty string if out of bounds.
        """
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def advance(self, count: int = 1) -> Cursor:
        """
        Returns a new cursor `count` characters further along.

        Raises:
            ValueError: If that would move past the end of the source.
        """
        if self.position + count > len(self.source):
            raise ValueError(
                f"Attempted to advance past end of source at position=<{self.position}>"
            )
        return Cursor(self.source, self.position + count)

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)

    def __repr__(self) -> str:
        return f"Cursor({self.rest!r}, position={self.position})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Cursor)
            and self.source == other.source
            and self.position == other.position
        )

    def __hash__(self) -> int:
        return hash((self.source, self.position))


class Token:
    """Represents a single lexeme of an arithmetic expression.

    Attributes:
        type (str): The canonical token type (e.g. 'NUMBER', 'PLUS', 'LPAREN').
        value (str): The raw text of the token. For NUMBER this is the signed
            digit run with inner whitespace removed (e.g. '-42').
        col (int): The 1-based column where the token starts.
    """

    def __init__(self, type_: str, value: str, col: int = 0):
        self.type = type_
        self.value = value
        self.col = col

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.type == other.type
            and self.value == other.value
            and self.col == other.col
        )

    def __hash__(self) -> int:
        return hash((self.type, self.value, self.col))


class Lexer:
    """Scanning rules shared by every grammar level.

    Each rule takes a Cursor and either returns what it matched together with
    the advanced Cursor, or raises ParseError. Cursors are immutable, so a
    failed rule never moves the caller's position.

    Attributes:
        whitespace (str): Characters treated as insignificant between tokens.
    """

    def __init__(self, whitespace: str = WHITESPACE) -> None:
        self.whitespace = whitespace

    def skip_whitespace(self, cursor: Cursor) -> Cursor:
        """Returns a cursor past any run of whitespace (possibly empty)."""
        count = 0
        while cursor.peek(count) != "" and cursor.peek(count) in self.whitespace:
            count += 1
        return cursor.advance(count) if count else cursor

    def scan_digits(self, cursor: Cursor) -> tuple[str, Cursor]:
        """Reads one or more ASCII digits.

        Raises:
            ParseError: If the cursor is not on a digit.
        """
        count = 0
        while cursor.peek(count) != "" and cursor.peek(count) in DIGITS:
            count += 1
        if count == 0:
            raise ParseError("digit", cursor.position)
        return cursor.source[cursor.position : cursor.position + count], cursor.advance(
            count
        )

    def match_char(self, cursor: Cursor, char: str) -> tuple[Token, Cursor]:
        """Matches exactly `char` at the cursor, with no whitespace skipping.

        Raises:
            ParseError: If the next character is not `char`.
        """
        if cursor.peek() != char:
            raise ParseError(repr(char), cursor.position)
        return Token(token_hashmap.get(char, char), char, cursor.col), cursor.advance()

    def match_operator(
        self, cursor: Cursor, allowed: tuple[str, ...]
    ) -> tuple[Token, Cursor]:
        """Matches one operator whose token type is in `allowed`.

        No whitespace is skipped here: the preceding factor has already
        consumed its trailing whitespace.

        Raises:
            ParseError: If the next character is not one of the allowed operators.
        """
        char = cursor.peek()
        if char == "" or token_hashmap.get(char) not in allowed:
            symbols = " or ".join(
                repr(sym) for sym, tok in token_hashmap.items() if tok in allowed
            )
            raise ParseError(symbols, cursor.position)
        return Token(token_hashmap[char], char, cursor.col), cursor.advance()

    def read_sign(self, cursor: Cursor) -> tuple[bool, Cursor]:
        """Reads `[ws] ['-'] [ws]` and reports whether a sign was present."""
        cursor = self.skip_whitespace(cursor)
        if cursor.peek() != "-":
            return False, cursor
        return True, self.skip_whitespace(cursor.advance())

    def read_integer(self, cursor: Cursor) -> tuple[Token, Cursor]:
        """Reads `[ws] ['-'] [ws] digit+ [ws]` as a NUMBER token.

        The token column points at the sign when present, else at the first digit.

        Raises:
            ParseError: If no digit follows the optional sign.
        """
        start = self.skip_whitespace(cursor)
        negative, cursor = self.read_sign(start)
        digits, cursor = self.scan_digits(cursor)
        value = f"-{digits}" if negative else digits
        return Token("NUMBER", value, start.col), self.skip_whitespace(cursor)


def tokenize(source: str) -> list[Token]:
    """Splits `source` into tokens, for inspection and debugging.

    Signs are kept as separate SUB tokens here; only the parser decides
    whether a `-` is a sign or an operator.

    Raises:
        ParseError: On any character that is neither whitespace, a digit,
            nor an operator or parenthesis.
    """
    lexer = Lexer()
    cursor = lexer.skip_whitespace(Cursor(source))
    tokens: list[Token] = []
    while not cursor.end_of_file():
        char = cursor.peek()
        if char in DIGITS:
            col = cursor.col
            digits, cursor = lexer.scan_digits(cursor)
            tokens.append(Token("NUMBER", digits, col))
        elif char in token_hashmap:
            tok, cursor = lexer.match_char(cursor, char)
            tokens.append(tok)
        else:
            raise ParseError("operator, digit or parenthesis", cursor.position)
        cursor = lexer.skip_whitespace(cursor)
    return tokens


__all__ = ["Cursor", "Lexer", "Token", "tokenize", "token_hashmap"]
