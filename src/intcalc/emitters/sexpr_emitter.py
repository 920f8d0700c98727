"""
Renders intcalc expression trees in fully parenthesized prefix form.

    1 + 2 * 3   ->  (+ 1 (* 2 3))
    -(4 - 1)    ->  (neg (- 4 1))

Every operator application gets its own parentheses, so the output shows
grouping and associativity exactly as parsed.
"""

from intcalc.intcalc_ast import ASTNode, fold_tree
from intcalc.intcalc_constants import operator_symbols


class SExprEmitter:
    """Emits prefix s-expressions from intcalc AST nodes."""

    def emit_expr(self, node: ASTNode) -> str:
        return fold_tree(node, self._emit)

    def _emit(self, node: ASTNode, parts: list[str]) -> str:
        method = getattr(self, f"emit_{node.kind}", None)
        if not callable(method):
            raise NotImplementedError(f"No s-expression emitter for kind '{node.kind}'")
        return str(method(node, parts))

    def emit_number(self, node: ASTNode, parts: list[str]) -> str:
        return str(node.value)

    def emit_negate(self, node: ASTNode, parts: list[str]) -> str:
        return f"(neg {parts[0]})"

    def emit_arith(self, node: ASTNode, parts: list[str]) -> str:
        try:
            op = operator_symbols[str(node.value)]
        except KeyError:
            raise NotImplementedError(
                f"Unknown arithmetic operator {node.value!r}"
            ) from None
        return f"({op} {parts[0]} {parts[1]})"
