"""
SeaPlus - Lexical Analyzer for the SeaPlus Teaching Language
============================================================

SeaPlus is a small C-like language used for teaching compiler
construction. This package provides its lexer: source text goes in, a
sequence of classified tokens with line numbers comes out. Malformed
input never stops the scan; lexical errors are reported on the tokens
themselves so that one pass finds all of them.

Main Components
---------------
- **lexer**: keyword table, token types, scanner and diagnostics
- **source**: reading source files (carriage returns stripped)
- **config**: lexer settings, with environment overrides
- **errors**: exception hierarchy and error collection

Quick Start
-----------
Tokenize a string:
    >>> from seaplus import Lexer
    >>> for token in Lexer('print "hi";').tokenize():
    ...     print(token)
    Token(KEYWORD, 'print', line 1)
    Token(STRING_LITERAL, '"hi"', line 1)
    Token(DELIMITER, ';', line 1)
    Token(EOF, 'EOF', line 1)

Check a file for lexical errors:
    >>> from seaplus import Lexer, read_source
    >>> collector = Lexer(read_source("hello.sp"), "hello.sp").collect_errors()
    >>> print(collector.report())

Or use the command-line tool:
    $ sptok hello.sp
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from seaplus.config import LexerConfig
from seaplus.errors import (
    SeaPlusError,
    SourceLocation,
    LexicalError,
    LexicalErrorReport,
    SourceReadError,
    ErrorCollector,
)
from seaplus.lexer import (
    KEYWORDS,
    is_keyword,
    ClassTag,
    LexErrorKind,
    Token,
    TokenKind,
    Lexer,
    Scanner,
    ScannerContext,
    next_token,
    tokenize,
    format_token,
)
from seaplus.source import read_source, decode_source, strip_carriage_returns

__all__ = [
    "__version__",
    "LexerConfig",
    "SeaPlusError",
    "SourceLocation",
    "LexicalError",
    "LexicalErrorReport",
    "SourceReadError",
    "ErrorCollector",
    "KEYWORDS",
    "is_keyword",
    "ClassTag",
    "LexErrorKind",
    "Token",
    "TokenKind",
    "Lexer",
    "Scanner",
    "ScannerContext",
    "next_token",
    "tokenize",
    "format_token",
    "read_source",
    "decode_source",
    "strip_carriage_returns",
]
