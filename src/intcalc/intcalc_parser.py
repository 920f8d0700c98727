"""
intcalc Expression Parser

Recursive-descent parser turning arithmetic expression text into an `ASTNode` tree.

Grammar
-------
    expr   = term  { ('+'|'-') term } ;
    term   = factor { ('*'|'/') factor } ;
    factor = [ws] ['-'] [ws] digit+ [ws]
           | [ws] ['-' [ws]] '(' expr ')' [ws] ;

Parser Behavior
---------------
- Every rule takes a `Cursor` and returns `(node, cursor)`. Cursors are immutable,
  so a failed attempt leaves the caller's position untouched.
- Term and Expression parse a seed and then fold trailing operator/operand pairs
  in a loop, building left-associative `arith` nodes. The loop stops, without
  failing, at the first pair that does not match; the returned cursor is the
  one from before that attempt.
- Precedence comes only from Term being parsed inside Expression's fold.
- A leading `-` belongs to the factor: it is folded into a literal's value, or
  becomes a `negate` node in front of a parenthesized group. At most one sign
  per factor, so `--1` is rejected.
- Integer literal magnitudes must fit the configured width, else `LiteralError`.
- With `evaluate=True` (the default) every node is evaluated as soon as it is
  built and its value stored in `node.result`. A division by zero therefore
  raises `DivisionByZeroError` at the point it is parsed, even inside an
  attempt that would later fail, and that error is never caught by a fold.

Entry Points
------------
- `parse_expression(cursor)`, `parse_term(cursor)`, `parse_factor(cursor)`,
  `parse_literal(cursor)`: one grammar rule each.
- `parse()`: parse a full expression from the start of the source.

Raises
------
ParseError
    When the rule cannot match at the cursor. Folds swallow failures of their
    optional trailing pairs; only a failed seed propagates.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from intcalc.intcalc_ast import ASTNode
from intcalc.intcalc_constants import (
    DEFAULT_BITS,
    additive_tokens,
    check_bits,
    multiplicative_tokens,
)
from intcalc.intcalc_errors import LiteralError, ParseError
from intcalc.intcalc_eval import Evaluator
from intcalc.intcalc_lexer import Cursor, Lexer

logger = logging.getLogger(__name__)


class Parser:
    """
    intcalc Parser Class

    Attributes
    ----------
    source : str
        The full input text.
    bits : int
        Integer width literals are checked against.
    lexer : Lexer
        Scanning rules for whitespace, operators and literals.
    evaluator : Evaluator | None
        Computes `node.result` for each node as it is built; None when
        parsing without evaluation.
    """

    def __init__(
        self, source: str, bits: int = DEFAULT_BITS, evaluate: bool = True
    ) -> None:
        self.source = source
        self.bits = check_bits(bits)
        self.lexer = Lexer()
        self.evaluator = Evaluator(self.bits) if evaluate else None
        # a literal with more significant digits than this is at least 2**(bits-1)
        self.max_digits = math.ceil((self.bits - 1) * math.log10(2))

    def parse(self) -> tuple[ASTNode, Cursor]:
        """Parses an expression starting at the beginning of the source."""
        node, cursor = self.parse_expression(Cursor(self.source))
        logger.debug("parsed %r -> %r, remainder %r", self.source, node, cursor.rest)
        return node, cursor

    def parse_literal(self, cursor: Cursor) -> tuple[ASTNode, Cursor]:
        """
        Parses an optionally signed integer literal into a `number` node.

        The digit run's magnitude is checked before the sign is applied.

        Raises
        ------
        ParseError
            If no digits follow the optional sign.
        LiteralError
            If the magnitude does not fit `bits`.
        """
        tok, after = self.lexer.read_integer(cursor)
        magnitude = tok.value.lstrip("-")
        significant = magnitude.lstrip("0")
        if len(significant) > self.max_digits or (
            significant and int(significant).bit_length() >= self.bits
        ):
            digits_at = self.source.index(magnitude, tok.col - 1)
            raise LiteralError(
                tok.value, self.bits, digits_at + len(magnitude), col=tok.col
            )
        value = int(significant or "0")
        if tok.value.startswith("-"):
            value = -value
        return self._evaluated(ASTNode("number", value, col=tok.col)), after

    def parse_group(self, cursor: Cursor) -> tuple[ASTNode, Cursor]:
        """
        Parses `[ws] ['-' [ws]] '(' expr ')' [ws]`.

        Returns the inner expression node, wrapped in `negate` when signed.
        """
        start = self.lexer.skip_whitespace(cursor)
        negative, cursor = self.lexer.read_sign(start)
        _, cursor = self.lexer.match_char(cursor, "(")
        inner, cursor = self.parse_expression(cursor)
        _, cursor = self.lexer.match_char(cursor, ")")
        cursor = self.lexer.skip_whitespace(cursor)
        if negative:
            negated = ASTNode("negate", children=[inner], col=start.col)
            return self._evaluated(negated), cursor
        return inner, cursor

    def parse_factor(self, cursor: Cursor) -> tuple[ASTNode, Cursor]:
        """
        Parses a literal or a (possibly negated) parenthesized group.

        If both alternatives fail, the error of the one that got further into
        the input is raised; ties go to the literal. If neither got past the
        factor's own starting position, raises "expected factor".
        """
        try:
            return self.parse_literal(cursor)
        except ParseError as literal_error:
            first = literal_error

        try:
            return self.parse_group(cursor)
        except ParseError as group_error:
            second = group_error

        furthest = second if second.position > first.position else first
        start = self.lexer.skip_whitespace(cursor).position
        if furthest.position <= start:
            raise ParseError("factor", start) from furthest
        raise furthest

    def parse_term(self, cursor: Cursor) -> tuple[ASTNode, Cursor]:
        """Parses `factor { ('*'|'/') factor }` as a left-leaning tree."""
        node, cursor = self.parse_factor(cursor)
        return self._fold(node, cursor, multiplicative_tokens, self.parse_factor)

    def parse_expression(self, cursor: Cursor) -> tuple[ASTNode, Cursor]:
        """Parses `term { ('+'|'-') term }` as a left-leaning tree."""
        node, cursor = self.parse_term(cursor)
        return self._fold(node, cursor, additive_tokens, self.parse_term)

    def _fold(
        self,
        acc: ASTNode,
        cursor: Cursor,
        operators: tuple[str, ...],
        operand: Callable[[Cursor], tuple[ASTNode, Cursor]],
    ) -> tuple[ASTNode, Cursor]:
        while True:
            try:
                op, after_op = self.lexer.match_operator(cursor, operators)
                rhs, after = operand(after_op)
            except ParseError as e:
                logger.debug("fold stopped at col %d: %s", cursor.col, e)
                return acc, cursor
            acc = self._evaluated(ASTNode("arith", op.type, [acc, rhs], col=op.col))
            cursor = after

    def _evaluated(self, node: ASTNode) -> ASTNode:
        if self.evaluator is not None:
            operands = [int(child.result) for child in node.children]  # type: ignore[arg-type]
            node.result = self.evaluator.fold_node(node, operands)
        return node
