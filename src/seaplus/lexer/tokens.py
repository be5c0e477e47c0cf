"""
SeaPlus Token Definitions
=========================

Token kinds, lexical error kinds, the Token record itself, and the
"class tag" the scanner remembers between tokens to enforce the
consecutive-operator rule.
"""

from dataclasses import dataclass
from enum import Enum, auto


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Lexical category of a token. Exactly one applies per token.
    """

    EOF = auto()                # End of input
    NUMBER = auto()             # 123
    OPERATOR = auto()           # + - * / % && || <<< ...
    ERROR = auto()              # Unrecognized character
    KEYWORD = auto()            # if while func ...
    IDENTIFIER = auto()         # myVar _tmp
    STRING_LITERAL = auto()     # "SeaPlus+"
    CHAR_LITERAL = auto()       # 'c' '\n'
    DELIMITER = auto()          # ( ) { } [ ] ; ,
    SPECIAL_CHARACTER = auto()  # _ &


# =============================================================================
# Lexical Error Enumeration
# =============================================================================

class LexErrorKind(Enum):
    """
    Lexical error carried by a token.

    INVALID_NUMBER, STRING_OVERFLOW and OPEN_DELIMITER are never produced
    by the scanner. They stay here so later layers (numeric validation,
    capacity checks, bracket balancing) can report them.
    """

    NONE = auto()
    INVALID_CHAR = auto()
    INVALID_NUMBER = auto()
    CONSECUTIVE_OPERATORS = auto()
    STRING_OVERFLOW = auto()
    UNTERMINATED_STRING = auto()
    INVALID_ESCAPE_CHARACTER = auto()
    UNTERMINATED_CHARACTER = auto()
    OPEN_DELIMITER = auto()


# =============================================================================
# Previous-Token Class Tags
# =============================================================================

class ClassTag(Enum):
    """
    Class of the most recently emitted token.

    Only OPERATOR matters to the scanner: an operator directly after an
    OPERATOR-tagged token is a consecutive-operator error. Operators that
    end in '=' and the chainable '!' and '$' forms get their own tags so
    that a following operator is accepted.
    """

    NONE = auto()
    NUMBER = auto()
    KEYWORD = auto()
    IDENTIFIER = auto()
    STRING = auto()
    CHAR = auto()
    OPERATOR = auto()
    EQUALS_SUFFIXED = auto()
    REPEATABLE_UNARY = auto()
    BRACKET = auto()
    DELIMITER = auto()
    SPECIAL = auto()


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from SeaPlus source.

    Attributes:
        kind: The TokenKind classification
        lexeme: Text of the token. For character literals this is the
            literal's content ('a' or the two-character escape form '\\n'),
            everywhere else it is the consumed source text.
        line: Line number where the token started (1-indexed)
        error: Lexical error, LexErrorKind.NONE for a clean token
        offset: Source offset of the first consumed character
        end: Source offset just past the last consumed character
    """
    kind: TokenKind
    lexeme: str
    line: int
    error: LexErrorKind = LexErrorKind.NONE
    offset: int = 0
    end: int = 0

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.error is not LexErrorKind.NONE:
            return f"Token({self.kind.name}, {self.lexeme!r}, line {self.line}, {self.error.name})"
        return f"Token({self.kind.name}, {self.lexeme!r}, line {self.line})"

    @property
    def is_error(self) -> bool:
        """Return True if this token carries a lexical error."""
        return self.error is not LexErrorKind.NONE

    @property
    def is_eof(self) -> bool:
        """Return True if this is the end-of-input token."""
        return self.kind is TokenKind.EOF
