"""
SeaPlus Keyword Table
=====================

The fixed set of reserved words. Identifiers that exactly match one of
these are emitted as KEYWORD tokens instead of IDENTIFIER tokens.
"""

# Ordered as they are documented: control flow, I/O, types, other.
KEYWORDS: tuple[str, ...] = (
    # Control flow
    "if", "else", "switch", "case", "default",
    "do", "while", "for", "until", "break",

    # I/O
    "print", "read",

    # Types
    "int", "float", "double", "char", "bool", "string", "void",

    # Other
    "func",
    "null", "true", "false",
)

_KEYWORD_SET = frozenset(KEYWORDS)


def is_keyword(text: str) -> bool:
    """Return True if text is exactly one of the reserved words."""
    return text in _KEYWORD_SET
