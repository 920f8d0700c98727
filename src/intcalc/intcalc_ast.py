"""
Defines the expression tree produced by the intcalc parser.

Classes:
    ASTNode:
        A node in the expression tree, consumed by the evaluator and the emitters.

    ASTDict:
        TypedDict form of an ASTNode, for JSON output or debugging.

Node kinds:
    number: `value` is the signed integer value of a literal; no children.
    negate: unary minus applied to a parenthesized group; one child.
    arith:  binary operator; `value` is "PLUS", "SUB", "MULT" or "DIV"; two children.

Each node also tracks `col`, the 1-based source column it starts at (for
`arith`, the column of the operator), used in error messages, and `result`,
the value the parser computed for it while parsing (None when parsed without
evaluation).

Left folds make trees as deep as an operator chain is long, so every walk
here uses an explicit stack (`fold_tree`) rather than recursion.

Example:
    node = ASTNode("arith", "PLUS", [ASTNode("number", 1), ASTNode("number", 2)])
"""

from collections.abc import Callable
from typing import Any, TypedDict, TypeVar

NODE_KINDS = ("number", "negate", "arith")

T = TypeVar("T")


class ASTDict(TypedDict):
    """Serialized ASTNode."""

    kind: str
    value: int | str | None
    col: int
    children: list["ASTDict"]


class ASTNode:
    """
    A node in an intcalc expression tree.

    Args:
        kind (str): One of `NODE_KINDS`.
        value (int | str, optional): Literal value for `number`, operator token type for `arith`.
        children (list[ASTNode], optional): Operand nodes.
        col (int): Source column (default is 0, meaning unknown).

    Attributes:
        result (int | None): Value computed while parsing. Not part of equality
            or serialization.

    Methods:
        __repr__(): Structured string representation for debugging.
        __eq__(other): Structural equality, including columns.
        same_shape(other): Structural equality ignoring columns.
        to_dict(): Converts the node and its descendants to nested dictionaries.
    """

    def __init__(
        self,
        kind: str,
        value: int | str | None = None,
        children: list["ASTNode"] | None = None,
        col: int = 0,
    ):
        if kind not in NODE_KINDS:
            raise ValueError(f"Unknown node kind: {kind!r}")
        self.kind = kind
        self.value = value
        self.children: list["ASTNode"] = children or []
        self.col = col
        self.result: int | None = None

    @property
    def left(self) -> "ASTNode":
        return self.children[0]

    @property
    def right(self) -> "ASTNode":
        return self.children[1]

    def __repr__(self) -> str:
        def render(node: ASTNode, parts: list[str]) -> str:
            fields = [f"{node.kind}"]
            if node.value is not None:
                fields.append(f"value={node.value!r}")
            if parts:
                fields.append(f"children=[{', '.join(parts)}]")
            return f"ASTNode({', '.join(fields)})"

        return fold_tree(self, render)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ASTNode):
            return False
        return self._matches(other, with_col=True)

    def same_shape(self, other: "ASTNode") -> bool:
        """Compares two trees by kind, value and children only."""
        return self._matches(other, with_col=False)

    def _matches(self, other: "ASTNode", with_col: bool) -> bool:
        stack = [(self, other)]
        while stack:
            a, b = stack.pop()
            if not isinstance(b, ASTNode):
                return False
            if (
                a.kind != b.kind
                or a.value != b.value
                or len(a.children) != len(b.children)
                or (with_col and a.col != b.col)
            ):
                return False
            stack.extend(zip(a.children, b.children))
        return True

    def to_dict(self) -> ASTDict:
        def build(node: ASTNode, children: list[ASTDict]) -> ASTDict:
            return {
                "kind": node.kind,
                "value": node.value,
                "col": node.col,
                "children": children,
            }

        return fold_tree(self, build)


def fold_tree(root: ASTNode, combine: Callable[[ASTNode, list[T]], T]) -> T:
    """
    Folds a tree bottom-up without recursion.

    `combine(node, child_results)` is called once per node, after all of its
    children, with their results in child order.

    Args:
        root (ASTNode): The tree to fold.
        combine (Callable): Builds a node's result from its children's results.

    Returns:
        The result of `combine` for `root`.
    """
    results: list[T] = []
    stack: list[tuple[ASTNode, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if not expanded:
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(node.children))
            continue
        start = len(results) - len(node.children)
        operands = results[start:]
        del results[start:]
        results.append(combine(node, operands))
    return results[0]
