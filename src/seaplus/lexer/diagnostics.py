"""
Lexical Diagnostics
===================

Turns tokens into human-readable text: one line per token for listings,
and LexicalError exceptions with source context for error reports.

Listing format:
    Token: NUMBER | Lexeme: '123' | Line: 1
    Lexical Error at line 2: Consecutive operators not allowed
"""

from typing import Optional

from seaplus.errors import LexicalError, SourceLocation
from seaplus.lexer.tokens import LexErrorKind, Token


# Message per error kind; {lexeme} is filled in from the token
ERROR_MESSAGES: dict[LexErrorKind, str] = {
    LexErrorKind.INVALID_CHAR: "Invalid character '{lexeme}'",
    LexErrorKind.INVALID_NUMBER: "Invalid number format",
    LexErrorKind.CONSECUTIVE_OPERATORS: "Consecutive operators not allowed",
    LexErrorKind.STRING_OVERFLOW: "String literal too long",
    LexErrorKind.UNTERMINATED_STRING: "Unterminated string",
    LexErrorKind.INVALID_ESCAPE_CHARACTER: "Invalid escape character '{lexeme}'",
    LexErrorKind.UNTERMINATED_CHARACTER: "Unterminated character literal",
    LexErrorKind.OPEN_DELIMITER: "Unclosed brackets",
}

ERROR_HINTS: dict[LexErrorKind, str] = {
    LexErrorKind.INVALID_CHAR: "remove the character or put it inside a string",
    LexErrorKind.CONSECUTIVE_OPERATORS: "separate the operators with an operand",
    LexErrorKind.UNTERMINATED_STRING: "add a closing '\"' to complete the string",
    LexErrorKind.INVALID_ESCAPE_CHARACTER: (
        "valid escapes are \\\\ \\' \\\" \\? \\n \\r \\t"
    ),
    LexErrorKind.UNTERMINATED_CHARACTER: (
        "character literals hold exactly one character or one escape"
    ),
    LexErrorKind.OPEN_DELIMITER: "close every (, { and [",
}


def describe_error(kind: LexErrorKind, lexeme: str = "") -> str:
    """Return the message for an error kind."""
    template = ERROR_MESSAGES.get(kind, "Unknown error")
    return template.format(lexeme=lexeme)


def format_error(token: Token) -> str:
    """Format an error token as 'Lexical Error at line N: message'."""
    return f"Lexical Error at line {token.line}: {describe_error(token.error, token.lexeme)}"


def format_token(token: Token) -> str:
    """Format a token for a listing; error tokens go through format_error."""
    if token.is_error:
        return format_error(token)
    return f"Token: {token.kind.name} | Lexeme: '{token.lexeme}' | Line: {token.line}"


def source_line(source: str, line: int) -> Optional[str]:
    """Return the text of a 1-indexed line, or None if out of range."""
    lines = source.split("\n")
    if 1 <= line <= len(lines):
        return lines[line - 1]
    return None


def token_error(token: Token, filename: str = "<input>", source: str = "") -> LexicalError:
    """
    Build a LexicalError for an error token.

    Args:
        token: A token whose error is not LexErrorKind.NONE
        filename: Name to show in the location prefix
        source: The scanned text, used to quote the offending line
    """
    message = describe_error(token.error, token.lexeme)
    return LexicalError(
        message[0].lower() + message[1:],
        location=SourceLocation(filename, token.line),
        hint=ERROR_HINTS.get(token.error),
        source_line=source_line(source, token.line) if source else None,
    )
