"""
SeaPlus Lexical Scanner
=======================

This module converts SeaPlus source text into a stream of tokens.

The scanner works in a pull model: each call to next_token() skips
whitespace and comments, looks at the character under the cursor and
hands off to exactly one sub-scanner, which consumes at least one
character and returns a Token. Callers keep pulling until they get the
EOF token.

Scan state (cursor, current line, class of the previous token) lives in
a ScannerContext owned by the caller. Two passes over two buffers never
share state.

Token Categories
----------------
- Numbers: 123 (decimal digits only)
- Identifiers: myVar, _tmp, x1
- Keywords: int, while, func, ... (see keywords.py)
- Special characters: a lone _ and a lone &
- Strings: "double quoted", no escape processing
- Characters: 'c', '\\n' (fixed width, see _scan_char)
- Operators: + ++ += - -- -= * *= / /= % %= = == ! != | || ^ ^^
  && &? < << <<< <= > >> >>> >= $
- Delimiters: ( ) { } [ ] ; ,

Comments
--------
- Single-line: # comment
- Multi-line: /* comment */

Consecutive Operators
---------------------
An operator that directly follows an operator token is an error, even
across whitespace: "1 ++ +2" reports the lone '+'. Operators ending in
'=' and the '!' and '$' forms may be followed by another operator, and
'!' and '$' may themselves follow any operator.

Example Usage
-------------
>>> from seaplus.lexer import Lexer
>>> for token in Lexer('int x = 42;').tokenize():
...     print(token)
Token(KEYWORD, 'int', line 1)
Token(IDENTIFIER, 'x', line 1)
Token(OPERATOR, '=', line 1)
Token(NUMBER, '42', line 1)
Token(DELIMITER, ';', line 1)
Token(EOF, 'EOF', line 1)
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional
import logging
import string

from seaplus.config import LexerConfig
from seaplus.errors import ErrorCollector, SourceLocation
from seaplus.lexer.diagnostics import token_error
from seaplus.lexer.keywords import is_keyword
from seaplus.lexer.tokens import ClassTag, LexErrorKind, Token, TokenKind

logger = logging.getLogger(__name__)


# =============================================================================
# Character Classes
# =============================================================================

# frozensets so that the "" returned past end of input is never a member
WHITESPACE = frozenset(" \t\n")
DIGITS = frozenset(string.digits)
IDENT_START = frozenset(string.ascii_letters)
ALNUM = frozenset(string.ascii_letters + string.digits)
IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")

OPERATOR_CHARS = "$+-*/%=!|^&<>"
BRACKETS = "(){}[]"
PLAIN_DELIMITERS = ";,"

# Operators allowed directly after another operator
ADJACENCY_EXEMPT = frozenset("!$")

# Valid selectors after a backslash in a character literal
CHAR_ESCAPES = frozenset("\\'\"?nrt")

EOF_LEXEME = "EOF"


# =============================================================================
# Scanner State
# =============================================================================

@dataclass(frozen=True)
class ScanWarning:
    """A non-fatal problem found while skipping layout, e.g. an open comment."""
    line: int
    message: str


@dataclass
class ScannerContext:
    """
    Mutable state for one tokenization pass over one source buffer.

    Attributes:
        pos: Offset of the next unread character
        line: Current line number (1-indexed), advanced by newlines in
            whitespace and comments
        last_class: Class of the most recently emitted token
        warnings: Warnings recorded so far
    """
    pos: int = 0
    line: int = 1
    last_class: ClassTag = ClassTag.NONE
    warnings: List[ScanWarning] = field(default_factory=list)

    def reset(self) -> None:
        """Return to the start-of-buffer state."""
        self.pos = 0
        self.line = 1
        self.last_class = ClassTag.NONE
        self.warnings = []

    def copy(self) -> "ScannerContext":
        """Return an independent copy of this context."""
        return ScannerContext(self.pos, self.line, self.last_class, list(self.warnings))


# =============================================================================
# Scanner
# =============================================================================

class Scanner:
    """
    Produces tokens one at a time from a source buffer.

    The scanner itself holds no state beyond its context, so several
    scanners can share a source string as long as each has its own
    ScannerContext.

    Attributes:
        source: The text being scanned
        context: Cursor, line and previous-token class
        config: Lexeme capacity and related settings
    """

    def __init__(
        self,
        source: str,
        context: Optional[ScannerContext] = None,
        config: Optional[LexerConfig] = None,
    ):
        self.source = source
        self.context = context if context is not None else ScannerContext()
        self.config = config if config is not None else LexerConfig()

    def next_token(self) -> Token:
        """
        Scan and return the next token, advancing the cursor.

        Returns the EOF token (without moving) once input is exhausted.
        """
        self._skip_whitespace_and_comments()

        start = self.context.pos
        if self._at_end():
            return self._make_token(TokenKind.EOF, EOF_LEXEME, start)

        token = self._scan_token(start)
        logger.debug("%r at offset %d", token, start)
        return token

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self.context.pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """
        Look at character at current position + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self.context.pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """Consume and return the current character."""
        if self._at_end():
            return ""
        char = self.source[self.context.pos]
        self.context.pos += 1
        return char

    def _skip(self, count: int) -> None:
        """Consume up to count characters, stopping at end of input."""
        self.context.pos = min(self.context.pos + count, len(self.source))

    def _has_room(self, length: int) -> bool:
        """Return True if a lexeme of this length may grow by one more character."""
        limit = self.config.max_lexeme_length
        return limit is None or length < limit

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _make_token(
        self,
        kind: TokenKind,
        lexeme: str,
        start: int,
        error: LexErrorKind = LexErrorKind.NONE,
    ) -> Token:
        """Create a token spanning from start to the current position."""
        return Token(
            kind=kind,
            lexeme=lexeme,
            line=self.context.line,
            error=error,
            offset=start,
            end=self.context.pos,
        )

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace_and_comments(self) -> None:
        """Skip all whitespace and comments."""
        while not self._at_end():
            char = self._peek()

            if char in WHITESPACE:
                self._consume_layout()
                continue

            # Single-line comment: #
            if char == "#":
                self._skip_line_comment()
                continue

            # Multi-line comment: /* */
            if char == "/" and self._peek(1) == "*":
                self._skip_block_comment()
                continue

            break

    def _consume_layout(self) -> None:
        """Consume one whitespace or comment character, counting newlines."""
        if self._advance() == "\n":
            self.context.line += 1

    def _skip_line_comment(self) -> None:
        """Skip a # comment up to, but not including, the newline."""
        while not self._at_end() and self._peek() != "\n":
            self._advance()

    def _skip_block_comment(self) -> None:
        """
        Skip a /* ... */ comment.

        An unterminated comment runs to end of input and leaves a warning
        on the context instead of failing.
        """
        start_line = self.context.line
        self._skip(2)

        while not self._at_end():
            if self._peek() == "*" and self._peek(1) == "/":
                self._skip(2)
                return
            self._consume_layout()

        message = f"unterminated block comment starting at line {start_line}"
        self.context.warnings.append(ScanWarning(start_line, message))
        logger.warning(message)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self, start: int) -> Token:
        """Classify the character under the cursor and scan one token."""
        char = self._peek()
        following = self._peek(1)

        if char in DIGITS:
            return self._scan_number(start)

        # An underscore only starts an identifier when something follows it
        if char in IDENT_START or (char == "_" and following in ALNUM):
            return self._scan_identifier(start)

        # &, &? are operators, & alone is special
        if char == "_" or (char == "&" and following not in ("&", "?")):
            return self._scan_special(start)

        handler = self._DISPATCH.get(char, Scanner._scan_invalid)
        return handler(self, start)

    def _scan_number(self, start: int) -> Token:
        """Scan a run of decimal digits."""
        chars = []
        while self._peek() in DIGITS and self._has_room(len(chars)):
            chars.append(self._advance())

        self.context.last_class = ClassTag.NUMBER
        return self._make_token(TokenKind.NUMBER, "".join(chars), start)

    def _scan_identifier(self, start: int) -> Token:
        """
        Scan an identifier or keyword.

        Identifiers contain letters, digits and underscores. Keywords are
        distinguished by checking against the keyword table.
        """
        chars = []
        while self._peek() in IDENT_CHARS and self._has_room(len(chars)):
            chars.append(self._advance())

        name = "".join(chars)
        if is_keyword(name):
            self.context.last_class = ClassTag.KEYWORD
            return self._make_token(TokenKind.KEYWORD, name, start)

        self.context.last_class = ClassTag.IDENTIFIER
        return self._make_token(TokenKind.IDENTIFIER, name, start)

    def _scan_special(self, start: int) -> Token:
        """Scan a lone _ or & as a special character."""
        char = self._advance()
        self.context.last_class = ClassTag.SPECIAL
        return self._make_token(TokenKind.SPECIAL_CHARACTER, char, start)

    def _scan_string(self, start: int) -> Token:
        """
        Scan a double-quoted string literal.

        The lexeme keeps both quotes. Backslashes have no special meaning.
        A string longer than the lexeme capacity is cut off there and the
        rest of the line is scanned as ordinary tokens.
        """
        chars = [self._advance()]  # opening "
        self.context.last_class = ClassTag.STRING

        while True:
            if self._at_end():
                return self._make_token(
                    TokenKind.STRING_LITERAL,
                    "".join(chars),
                    start,
                    LexErrorKind.UNTERMINATED_STRING,
                )

            if not self._has_room(len(chars)):
                logger.debug("string literal at offset %d truncated", start)
                break

            char = self._advance()
            chars.append(char)
            if char == '"':
                break

        return self._make_token(TokenKind.STRING_LITERAL, "".join(chars), start)

    def _scan_char(self, start: int) -> Token:
        """
        Scan a single-quoted character literal.

        Character literals have a fixed width: 'c' is three characters and
        '\\c' is four. The width is decided from the characters right after
        the opening quote and the cursor always moves by that width, valid
        or not, so a malformed literal can never stall the scanner.

        The lexeme is the literal's content: the character itself, or the
        backslash and selector for an escape.
        """
        self.context.last_class = ClassTag.CHAR
        first = self._peek(1)
        error = LexErrorKind.NONE

        if first == "\\":
            selector = self._peek(2)
            lexeme = "\\" + selector
            if selector not in CHAR_ESCAPES:
                error = LexErrorKind.INVALID_ESCAPE_CHARACTER
            elif self._peek(3) != "'":
                error = LexErrorKind.UNTERMINATED_CHARACTER
            self._skip(4)
        else:
            lexeme = first
            # '?' is reserved and may not appear alone in a literal
            if first == "?":
                error = LexErrorKind.INVALID_CHAR
            elif self._peek(2) != "'":
                error = LexErrorKind.UNTERMINATED_CHARACTER
            self._skip(3)

        return self._make_token(TokenKind.CHAR_LITERAL, lexeme, start, error)

    def _scan_operator(self, start: int) -> Token:
        """
        Scan an operator, enforcing the consecutive-operator rule.

        A rejected operator consumes one character and leaves the previous
        class in place, so "+-*" reports both '-' and '*'.
        """
        char = self._peek()

        if self.context.last_class is ClassTag.OPERATOR and char not in ADJACENCY_EXEMPT:
            self._advance()
            return self._make_token(
                TokenKind.OPERATOR, char, start, LexErrorKind.CONSECUTIVE_OPERATORS
            )

        lexeme, tag = self._match_operator(char)
        self._skip(len(lexeme))
        self.context.last_class = tag
        return self._make_token(TokenKind.OPERATOR, lexeme, start)

    def _match_operator(self, char: str) -> tuple[str, ClassTag]:
        """
        Pick the longest operator starting with char.

        Operator groups by leading character:
            + -      repeat once or take '=':   ++ -- += -=
            * / % =  take '=':                  *= /= %= ==
            !        take '=':                  !=
            | ^      repeat once:               || ^^
            &        repeat or take '?', never alone:  && &?
            < >      repeat up to three times, or take '=':
                     <<< >>> << >> <= >=
            $        always alone

        Returns:
            The operator text and the class tag it leaves behind
        """
        following = self._peek(1)

        if char in "+-":
            if following == "=":
                return char + following, ClassTag.EQUALS_SUFFIXED
            if following == char:
                return char * 2, ClassTag.OPERATOR
            return char, ClassTag.OPERATOR

        if char in "*/%=":
            if following == "=":
                return char + following, ClassTag.EQUALS_SUFFIXED
            return char, ClassTag.OPERATOR

        if char == "!":
            if following == "=":
                return "!=", ClassTag.REPEATABLE_UNARY
            return "!", ClassTag.REPEATABLE_UNARY

        if char in "|^":
            if following == char:
                return char * 2, ClassTag.OPERATOR
            return char, ClassTag.OPERATOR

        if char == "&" and following in ("&", "?"):
            return char + following, ClassTag.OPERATOR

        if char in "<>":
            if following == char:
                if self._peek(2) == char:
                    return char * 3, ClassTag.OPERATOR
                return char * 2, ClassTag.OPERATOR
            # <=< is <= followed by <, never a shift
            if following == "=":
                return char + following, ClassTag.EQUALS_SUFFIXED
            return char, ClassTag.OPERATOR

        if char == "$":
            return char, ClassTag.REPEATABLE_UNARY

        logger.warning(
            "character %r reached the operator scanner without a rule; "
            "treating it as a standalone operator",
            char,
        )
        return char, ClassTag.OPERATOR

    def _scan_delimiter(self, start: int) -> Token:
        """Scan a bracket or a separator. Bracket balance is not checked."""
        char = self._advance()
        if char in BRACKETS:
            self.context.last_class = ClassTag.BRACKET
        else:
            self.context.last_class = ClassTag.DELIMITER
        return self._make_token(TokenKind.DELIMITER, char, start)

    def _scan_invalid(self, start: int) -> Token:
        """Consume one unrecognized character as an error token."""
        char = self._advance()
        return self._make_token(TokenKind.ERROR, char, start, LexErrorKind.INVALID_CHAR)

    # Character under the cursor -> sub-scanner, for everything not
    # decided by a character class in _scan_token
    _DISPATCH = {
        '"': _scan_string,
        "'": _scan_char,
        **dict.fromkeys(OPERATOR_CHARS, _scan_operator),
        **dict.fromkeys(BRACKETS + PLAIN_DELIMITERS, _scan_delimiter),
    }


def next_token(
    source: str,
    context: ScannerContext,
    config: Optional[LexerConfig] = None,
) -> Token:
    """
    Scan the next token of source at context.pos.

    Args:
        source: The whole source buffer
        context: State for this pass; updated in place
        config: Lexer settings (defaults if omitted)

    Returns:
        The next token; an EOF token once input is exhausted
    """
    return Scanner(source, context, config).next_token()


# =============================================================================
# Lexer Front End
# =============================================================================

class Lexer:
    """
    Tokenizes a complete SeaPlus source buffer.

    Usage:
        lexer = Lexer(source_text, "hello.sp")
        tokens = list(lexer.tokenize())

    Every call to tokenize() starts a fresh pass from the beginning of
    the buffer.

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for error reporting)
        config: Lexer settings
        context: State of the current pass
    """

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        config: Optional[LexerConfig] = None,
    ):
        self.source = source
        self.filename = filename
        self.config = config if config is not None else LexerConfig()
        self.context = ScannerContext()
        self._scanner = Scanner(source, self.context, self.config)

    @property
    def warnings(self) -> List[ScanWarning]:
        """Warnings recorded by the current pass."""
        return self.context.warnings

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source code.

        Yields:
            Token objects, ending with exactly one EOF token
        """
        self.context.reset()

        while True:
            token = self._scanner.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                return

    def peek_token(self) -> Token:
        """
        Scan the next token without consuming it.

        The context is copied, the token scanned, then the context restored.
        """
        saved = self.context.copy()
        try:
            return self._scanner.next_token()
        finally:
            self.context.pos = saved.pos
            self.context.line = saved.line
            self.context.last_class = saved.last_class
            self.context.warnings = saved.warnings

    def collect_errors(self) -> ErrorCollector:
        """
        Run a full pass and collect every lexical error and warning.

        Collection stops after config.max_errors errors.

        Returns:
            ErrorCollector holding one LexicalError per error token
        """
        collector = ErrorCollector(max_errors=self.config.max_errors)

        for token in self.tokenize():
            if token.is_error:
                collector.add(token_error(token, self.filename, self.source))
                if collector.should_stop():
                    break

        for warning in self.warnings:
            collector.add_warning(
                warning.message, SourceLocation(self.filename, warning.line)
            )

        return collector


def tokenize(source: str, config: Optional[LexerConfig] = None) -> list[Token]:
    """Tokenize source and return all tokens, including the final EOF."""
    return list(Lexer(source, config=config).tokenize())
