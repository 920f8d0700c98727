"""
Renders intcalc expression trees as canonical infix text.

The output uses single spaces around binary operators and only the parentheses
needed for the text to parse back into the same tree:

    - an operand binding looser than its parent operator is parenthesized;
    - a right operand at the same level is parenthesized too, since the parser
      folds to the left (`1 - (2 - 3)`, `8 / (4 / 2)`);
    - a `negate` node always renders as `-(...)`, keeping it distinct from a
      negative literal.

Raises:
    - `NotImplementedError`: If a node kind or operator has no rendering.
"""

from intcalc.intcalc_ast import ASTNode, fold_tree
from intcalc.intcalc_constants import additive_tokens, operator_symbols

ATOM_LEVEL = 3


class InfixEmitter:
    """Emits infix text from intcalc AST nodes.

    Each `emit_<kind>` method receives the node and the already rendered text
    of its children; `emit_expr` drives them bottom-up with `fold_tree`.
    """

    def level(self, node: ASTNode) -> int:
        if node.kind != "arith":
            return ATOM_LEVEL
        return 1 if node.value in additive_tokens else 2

    def emit_expr(self, node: ASTNode) -> str:
        return fold_tree(node, self._emit)

    def _emit(self, node: ASTNode, parts: list[str]) -> str:
        method = getattr(self, f"emit_{node.kind}", None)
        if not callable(method):
            raise NotImplementedError(f"No infix emitter for kind '{node.kind}'")
        return str(method(node, parts))

    def emit_number(self, node: ASTNode, parts: list[str]) -> str:
        return str(node.value)

    def emit_negate(self, node: ASTNode, parts: list[str]) -> str:
        return f"-({parts[0]})"

    def emit_arith(self, node: ASTNode, parts: list[str]) -> str:
        if node.value not in operator_symbols:
            raise NotImplementedError(f"Unknown arithmetic operator {node.value!r}")
        level = self.level(node)
        left, right = parts
        if self.level(node.left) < level:
            left = f"({left})"
        if self.level(node.right) <= level:
            right = f"({right})"
        return f"{left} {operator_symbols[str(node.value)]} {right}"
