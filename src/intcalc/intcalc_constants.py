"""
Shared lexical and numeric constants for intcalc.

Exports:
    token_hashmap: Maps operator and punctuation symbols to canonical token types.
    additive_tokens / multiplicative_tokens: Operator groups for each precedence level.
    operator_symbols: Reverse map from token type to its symbol, used by emitters.
    WHITESPACE: Characters skipped around every token.
    DIGITS: Characters accepted in an integer literal.
    DEFAULT_BITS: Default integer width (signed, two's complement).
    MAX_BITS: Widest supported integer width.
"""

token_hashmap: dict[str, str] = {
    "+": "PLUS",
    "-": "SUB",
    "*": "MULT",
    "/": "DIV",
    "(": "LPAREN",
    ")": "RPAREN",
}

additive_tokens: tuple[str, ...] = ("PLUS", "SUB")
multiplicative_tokens: tuple[str, ...] = ("MULT", "DIV")

operator_symbols: dict[str, str] = {
    tok: sym
    for sym, tok in token_hashmap.items()
    if tok in additive_tokens + multiplicative_tokens
}

WHITESPACE = " \t"
DIGITS = "0123456789"

DEFAULT_BITS = 64
# widest supported width; keeps every literal that fits well under the
# interpreter's int-to-string digit limit
MAX_BITS = 4096


def check_bits(bits: int) -> int:
    """Validates an integer width and returns it unchanged.

    Raises:
        ValueError: If `bits` is not an integer between 2 and MAX_BITS.
    """
    if not isinstance(bits, int) or isinstance(bits, bool) or not 2 <= bits <= MAX_BITS:
        raise ValueError(
            f"Integer width must be an int between 2 and {MAX_BITS}, got {bits!r}"
        )
    return bits


__all__ = [
    "DEFAULT_BITS",
    "DIGITS",
    "MAX_BITS",
    "WHITESPACE",
    "additive_tokens",
    "check_bits",
    "multiplicative_tokens",
    "operator_symbols",
    "token_hashmap",
]
