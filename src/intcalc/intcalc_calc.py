"""
Public entry points for parsing and evaluating integer arithmetic.

Each function parses from the start of `source` with the matching grammar rule,
evaluating every sub-expression in `bits`-wide wrapping arithmetic as soon as it
is parsed, and returns a `ParseResult(value, remainder)`. The remainder is
whatever the rule did not consume; it is empty for a fully consumed expression,
and callers can check it to detect trailing garbage. `evaluate` does that check
for you.

A division by zero aborts the call even when it sits inside an attempt the
grammar would otherwise abandon: `expr("2 + (1/0")` raises rather than
returning `(2, "+ (1/0")`.

Functions:
    expr(source, bits=64) -> ParseResult
    term(source, bits=64) -> ParseResult
    factor(source, bits=64) -> ParseResult
    evaluate(source, bits=64) -> int
    parse_tree(source, bits=64) -> tuple[ASTNode, str]

Raises:
    ParseError: If the rule does not match at the start of the input.
    LiteralError: If the leading literal does not fit `bits`.
    DivisionByZeroError: If evaluation divides by zero.
    ValueError: If `bits` is not an int between 2 and MAX_BITS (4096).

Example:
    >>> expr("2*(3+4)")
    ParseResult(value=14, remainder='')
    >>> expr("1 + 2 )")
    ParseResult(value=3, remainder=')')
"""

from collections.abc import Callable
from typing import NamedTuple

from intcalc.intcalc_ast import ASTNode
from intcalc.intcalc_constants import DEFAULT_BITS
from intcalc.intcalc_errors import TrailingInputError
from intcalc.intcalc_eval import Evaluator
from intcalc.intcalc_lexer import Cursor
from intcalc.intcalc_parser import Parser


class ParseResult(NamedTuple):
    value: int
    remainder: str


def _run(
    source: str, bits: int, rule: Callable[[Parser], Callable[[Cursor], tuple[ASTNode, Cursor]]]
) -> ParseResult:
    parser = Parser(source, bits)
    node, cursor = rule(parser)(Cursor(source))
    value = node.result
    if value is None:
        value = Evaluator(bits).evaluate(node)
    return ParseResult(value, cursor.rest)


def expr(source: str, bits: int = DEFAULT_BITS) -> ParseResult:
    return _run(source, bits, lambda p: p.parse_expression)


def term(source: str, bits: int = DEFAULT_BITS) -> ParseResult:
    return _run(source, bits, lambda p: p.parse_term)


def factor(source: str, bits: int = DEFAULT_BITS) -> ParseResult:
    return _run(source, bits, lambda p: p.parse_factor)


def evaluate(source: str, bits: int = DEFAULT_BITS) -> int:
    """Evaluates `source` as one complete expression.

    Raises:
        TrailingInputError: If anything is left after the expression.
    """
    value, remainder = expr(source, bits)
    if remainder:
        raise TrailingInputError(remainder, len(source) - len(remainder))
    return value


def parse_tree(source: str, bits: int = DEFAULT_BITS) -> tuple[ASTNode, str]:
    """Parses without evaluating, returning the tree and the unconsumed remainder.

    Division by zero is not detected here, since nothing is evaluated.
    """
    node, cursor = Parser(source, bits, evaluate=False).parse()
    return node, cursor.rest


__all__ = ["ParseResult", "evaluate", "expr", "factor", "parse_tree", "term"]
