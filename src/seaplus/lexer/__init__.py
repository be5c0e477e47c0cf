"""
SeaPlus Lexer
=============

Tokenizer for the SeaPlus teaching language.

Components
----------
- **keywords**: reserved word table and is_keyword()
- **tokens**: TokenKind, LexErrorKind, ClassTag and the Token record
- **scanner**: Scanner/next_token() pull interface and the Lexer front end
- **diagnostics**: token listings and LexicalError construction

Usage
-----
    >>> from seaplus.lexer import Lexer, TokenKind
    >>> tokens = list(Lexer("x += 1;").tokenize())
    >>> [t.lexeme for t in tokens]
    ['x', '+=', '1', ';', 'EOF']
"""

from seaplus.lexer.keywords import KEYWORDS, is_keyword
from seaplus.lexer.tokens import ClassTag, LexErrorKind, Token, TokenKind
from seaplus.lexer.scanner import (
    Lexer,
    ScanWarning,
    Scanner,
    ScannerContext,
    next_token,
    tokenize,
)
from seaplus.lexer.diagnostics import (
    describe_error,
    format_error,
    format_token,
    token_error,
)

__all__ = [
    "KEYWORDS",
    "is_keyword",
    "ClassTag",
    "LexErrorKind",
    "Token",
    "TokenKind",
    "Lexer",
    "ScanWarning",
    "Scanner",
    "ScannerContext",
    "next_token",
    "tokenize",
    "describe_error",
    "format_error",
    "format_token",
    "token_error",
]
