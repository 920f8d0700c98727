"""
Exception types raised by the intcalc parser and evaluator.

Classes:
    CalcError: Base class for every intcalc failure.
    ParseError: Input does not match the grammar at some column.
    LiteralError: A digit run was found but does not fit the integer width.
    TrailingInputError: A complete parse was required but input remained.
    DivisionByZeroError: A `/` with a zero right operand was evaluated.

`ParseError` is also a `SyntaxError` and `DivisionByZeroError` is also an
`ArithmeticError`, so callers may catch either the intcalc or the builtin type.
A division by zero is never a `ParseError`: grammar folds only stop on
`ParseError`, so an arithmetic failure always aborts the whole call.
"""


class CalcError(Exception):
    """Base exception for intcalc.

    Attributes:
        col (int): 1-based column the failure refers to, 0 when unknown.
    """

    def __init__(self, message: str, col: int = 0):
        super().__init__(message)
        self.message = message
        self.col = col

    def __str__(self) -> str:
        if self.col:
            return f"{self.message} at col {self.col}"
        return self.message


class ParseError(CalcError, SyntaxError):
    """Raised when the input does not match the grammar.

    Attributes:
        expected (str): Short description of what the parser wanted
            (e.g. "digit", "')'", "factor").
        position (int): 0-based index into the source where matching failed.
            Used to pick the alternative that got furthest.
    """

    def __init__(self, expected: str, position: int = 0):
        super().__init__(f"Expected {expected}", position + 1)
        self.expected = expected
        self.position = position


class LiteralError(ParseError):
    """Raised when an integer literal's magnitude does not fit the configured width.

    `position` is the end of the digit run, since the literal consumed it;
    `col` points at the start of the literal.

    Attributes:
        literal (str): The offending digit run.
        bits (int): The width it was checked against.
    """

    def __init__(self, literal: str, bits: int, position: int = 0, col: int = 0):
        super().__init__(f"integer literal fitting in {bits} bits", position)
        if col:
            self.col = col
        self.message = f"Integer literal {literal} does not fit in {bits} bits"
        self.literal = literal
        self.bits = bits


class TrailingInputError(ParseError):
    """Raised by `evaluate` when the expression does not consume the whole input.

    Attributes:
        remainder (str): The unconsumed suffix.
    """

    def __init__(self, remainder: str, position: int = 0):
        super().__init__("end of input", position)
        self.message = f"Unexpected trailing input {remainder!r}"
        self.remainder = remainder


class DivisionByZeroError(CalcError, ArithmeticError):
    """Raised when evaluation divides by zero. Not recoverable by the grammar."""

    def __init__(self, col: int = 0):
        super().__init__("Division by zero", col)


__all__ = [
    "CalcError",
    "DivisionByZeroError",
    "LiteralError",
    "ParseError",
    "TrailingInputError",
]
