"""
Provides the `Formatter` class and emitter interface for turning intcalc trees back into text.

Classes and Features:
    - Emitter (Protocol): Interface for all output emitters. Requires `emit_expr`.
    - InfixEmitter: Canonical infix text that re-parses to the same tree.
    - SExprEmitter: Fully parenthesized prefix form for inspecting structure.
    - Formatter: Picks an emitter by target name and renders a tree with it.

Example:
    >>> node, _ = Parser("2*(3+4)").parse()
    >>> Formatter("infix").format(node)
    '2 * (3 + 4)'

Raises:
    ValueError: If the target is not supported.
    TypeError: If the value to format is not an ASTNode.
    NotImplementedError: If the emitter has no rendering for a node kind.
"""

import logging
from typing import Protocol

from intcalc.emitters.infix_emitter import InfixEmitter
from intcalc.emitters.sexpr_emitter import SExprEmitter
from intcalc.intcalc_ast import ASTNode

logger = logging.getLogger(__name__)


class Emitter(Protocol):  # pragma: no cover
    """Protocol for intcalc emitters: render one expression tree as a string."""

    def emit_expr(self, node: ASTNode) -> str: ...  # pragma: no cover


EmitterType = type[Emitter]
"""Alias for a concrete Emitter class type."""


class Formatter:
    """Renders intcalc trees with the emitter selected by `target`.

    Attributes:
        target (str): Normalized target name.
        emitter (Emitter): The selected emitter instance.
    """

    emitters: dict[str, EmitterType] = {
        "infix": InfixEmitter,
        "sexpr": SExprEmitter,
    }

    def __init__(self, target: str = "infix") -> None:
        """Initializes the formatter.

        Args:
            target: Output form, one of the keys of `Formatter.emitters`.

        Raises:
            ValueError: If the target is not supported.
        """
        target = target.lower()
        if target not in self.emitters:
            raise ValueError(f"Unknown format target: {target!r}")
        self.target = target
        self.emitter: Emitter = self.emitters[target]()

    def format(self, node: ASTNode) -> str:
        if not isinstance(node, ASTNode):
            raise TypeError(f"Expected an ASTNode, got {type(node).__name__}")
        text = self.emitter.emit_expr(node)
        logger.debug("formatted %r as %s: %s", node, self.target, text)
        return text
