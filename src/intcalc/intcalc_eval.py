"""
Folds intcalc expression trees into fixed-width integers.

Behavior:
    - Every intermediate result is wrapped to a signed two's-complement integer
      of the configured width, so overflow wraps instead of growing.
    - `/` truncates toward zero.
    - Division by zero raises `DivisionByZeroError` with the column of the `/`.

Functions:
    wrap(value, bits): Reduces an int to the signed `bits`-wide range.
    trunc_div(a, b): Integer division rounding toward zero.
"""

import logging

from intcalc.intcalc_ast import ASTNode, fold_tree
from intcalc.intcalc_constants import DEFAULT_BITS, check_bits
from intcalc.intcalc_errors import DivisionByZeroError

logger = logging.getLogger(__name__)


def wrap(value: int, bits: int = DEFAULT_BITS) -> int:
    """Wraps `value` into the signed `bits`-wide two's-complement range."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def trunc_div(a: int, b: int) -> int:
    """Divides `a` by a non-zero `b`, truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class Evaluator:
    """Evaluates ASTNode trees.

    `fold_node` computes one node from its operands' values; the parser calls
    it on each node as soon as the node is complete, so arithmetic failures
    surface during parsing. `evaluate` applies it to a whole tree bottom-up
    with an explicit stack, so long operator chains do not deepen the call stack.

    Attributes:
        bits (int): Integer width results are wrapped to.
    """

    def __init__(self, bits: int = DEFAULT_BITS) -> None:
        self.bits = check_bits(bits)

    def evaluate(self, node: ASTNode) -> int:
        """
        Evaluates a whole tree.

        Raises:
            DivisionByZeroError: If a division's right operand evaluates to 0.
            NotImplementedError: If there is no evaluator for a node kind.
        """
        return fold_tree(node, self.fold_node)

    def fold_node(self, node: ASTNode, operands: list[int]) -> int:
        """Dispatches to `eval_<kind>` with the already computed operand values."""
        method = getattr(self, f"eval_{node.kind}", None)
        if not callable(method):
            raise NotImplementedError(f"No evaluator for node kind '{node.kind}'")
        return int(method(node, operands))

    def eval_number(self, node: ASTNode, operands: list[int]) -> int:
        return wrap(int(node.value), self.bits)  # type: ignore[arg-type]

    def eval_negate(self, node: ASTNode, operands: list[int]) -> int:
        return wrap(-operands[0], self.bits)

    def eval_arith(self, node: ASTNode, operands: list[int]) -> int:
        left, right = operands
        op = node.value
        if op == "PLUS":
            result = left + right
        elif op == "SUB":
            result = left - right
        elif op == "MULT":
            result = left * right
        elif op == "DIV":
            if right == 0:
                logger.debug("division by zero at col %d", node.col)
                raise DivisionByZeroError(node.col)
            result = trunc_div(left, right)
        else:
            raise NotImplementedError(f"Unknown arithmetic operator {op!r}")
        return wrap(result, self.bits)
