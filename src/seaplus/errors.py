"""
SeaPlus Error Hierarchy
=======================

This module defines the exception hierarchy for the SeaPlus toolchain.
All exceptions inherit from SeaPlusError, allowing callers to catch all
toolchain errors with a single except clause if desired.

Lexical errors are normally *data*: the scanner never raises on malformed
input, it returns tokens carrying an error kind. The classes here turn
those tokens into reportable exceptions when a caller wants them, and
collect them for batch reporting.

Exception Hierarchy
-------------------
SeaPlusError (base)
├── LexicalError - one lexical error with location and hint
│   └── LexicalErrorReport - aggregate of many errors, pre-formatted
└── SourceReadError - input file could not be read

Error Message Format
--------------------
    filename:line: error: description
        source_line_text
    hint: suggestion for fixing (when available)

Example:
    hello.sp:3: error: unterminated string
        print "hello
    hint: add a closing '"' to complete the string
"""

from dataclasses import dataclass
from typing import List, Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class SeaPlusError(Exception):
    """
    Base exception for all SeaPlus errors.

        try:
            tokens = Lexer(source).collect_errors().raise_if_errors()
        except SeaPlusError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A location in source code for error reporting.

    The scanner only tracks lines, so there is no column component.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        """Format as 'filename:line' for error messages."""
        return f"{self.filename}:{self.line}"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(SeaPlusError):
    """
    A single lexical error.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The source text of the offending line
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

            hello.sp:5: error: invalid character '@'
                int x = @;
            hint: remove the character or put it inside a string
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None:
            parts.append(f"    {self.source_line}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class LexicalErrorReport(LexicalError):
    """
    Aggregate error for a whole tokenization pass.

    The message is already a formatted report from ErrorCollector and
    should not have another prefix added.
    """

    def _format_message(self) -> str:
        """Return message as-is - it's already a formatted aggregate report."""
        return self.message


# =============================================================================
# Source Acquisition Errors
# =============================================================================

class SourceReadError(SeaPlusError):
    """
    Raised when a source file cannot be read.

    Attributes:
        path: The path that failed
        reason: The underlying OS error text
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read '{path}': {reason}")


# =============================================================================
# Error Collection
# =============================================================================

class ErrorCollector:
    """
    Collects lexical errors for batch reporting.

    The scanner keeps going after every error, so a single pass can report
    everything wrong with a file:

        collector = ErrorCollector(max_errors=100)

        for token in lexer.tokenize():
            if token.error is not LexErrorKind.NONE:
                collector.add(token_error(token, filename, source))
                if collector.should_stop():
                    break

        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self, max_errors: int = 100):
        """
        Initialize the error collector.

        Args:
            max_errors: Maximum errors to collect before stopping
        """
        self.errors: List[LexicalError] = []
        self.warnings: List[str] = []
        self.max_errors = max_errors

    def add(self, error: LexicalError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def add_warning(self, message: str, location: Optional[SourceLocation] = None) -> None:
        """Add a warning message."""
        if location:
            self.warnings.append(f"{location}: warning: {message}")
        else:
            self.warnings.append(f"warning: {message}")

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def should_stop(self) -> bool:
        """Return True if max_errors has been reached."""
        return len(self.errors) >= self.max_errors

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def warning_count(self) -> int:
        """Return the number of collected warnings."""
        return len(self.warnings)

    def report(self) -> str:
        """Format all errors and warnings for display."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        for warning in self.warnings:
            lines.append(warning)

        error_word = "error" if len(self.errors) == 1 else "errors"
        warning_word = "warning" if len(self.warnings) == 1 else "warnings"
        lines.append(
            f"\n{len(self.errors)} {error_word}, {len(self.warnings)} {warning_word}"
        )

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors and warnings."""
        self.errors.clear()
        self.warnings.clear()

    def raise_if_errors(self) -> None:
        """Raise a LexicalErrorReport if any errors were collected."""
        if self.has_errors():
            raise LexicalErrorReport(self.report())
