# =============================================================================
# test_diagnostics.py - Token Listing and Error Reporting Tests
# =============================================================================
# Covers the listing format, LexicalError formatting, ErrorCollector and
# Lexer.collect_errors().
# =============================================================================

import pytest

from seaplus.config import LexerConfig
from seaplus.errors import (
    ErrorCollector,
    LexicalError,
    LexicalErrorReport,
    SeaPlusError,
    SourceLocation,
)
from seaplus.lexer import (
    LexErrorKind,
    Lexer,
    Token,
    TokenKind,
    describe_error,
    format_error,
    format_token,
    token_error,
)
from seaplus.lexer.diagnostics import ERROR_MESSAGES, source_line


# =============================================================================
# Listing Format Tests
# =============================================================================

class TestFormatToken:
    """One line per token."""

    def test_number(self):
        token = Token(TokenKind.NUMBER, "123", 1)
        assert format_token(token) == "Token: NUMBER | Lexeme: '123' | Line: 1"

    def test_char_literal(self):
        token = Token(TokenKind.CHAR_LITERAL, "\\n", 4)
        assert format_token(token) == "Token: CHAR_LITERAL | Lexeme: '\\n' | Line: 4"

    def test_eof(self):
        token = Token(TokenKind.EOF, "EOF", 7)
        assert format_token(token) == "Token: EOF | Lexeme: 'EOF' | Line: 7"

    def test_error_token_uses_error_format(self):
        token = Token(TokenKind.OPERATOR, "+", 2, LexErrorKind.CONSECUTIVE_OPERATORS)
        assert format_token(token) == (
            "Lexical Error at line 2: Consecutive operators not allowed"
        )

    def test_invalid_char_message(self):
        token = Token(TokenKind.ERROR, "@", 3, LexErrorKind.INVALID_CHAR)
        assert format_error(token) == "Lexical Error at line 3: Invalid character '@'"


class TestDescribeError:
    """Messages keyed by error kind."""

    @pytest.mark.parametrize("kind", [k for k in LexErrorKind if k != LexErrorKind.NONE])
    def test_every_error_kind_has_message(self, kind):
        assert kind in ERROR_MESSAGES
        assert describe_error(kind, "x") != "Unknown error"

    def test_reserved_kinds(self):
        assert describe_error(LexErrorKind.OPEN_DELIMITER) == "Unclosed brackets"
        assert describe_error(LexErrorKind.INVALID_NUMBER) == "Invalid number format"

    def test_escape_message_includes_lexeme(self):
        message = describe_error(LexErrorKind.INVALID_ESCAPE_CHARACTER, "\\z")
        assert message == "Invalid escape character '\\z'"


class TestSourceLine:
    def test_lines(self):
        assert source_line("a\nb\nc", 2) == "b"

    def test_out_of_range(self):
        assert source_line("a", 0) is None
        assert source_line("a", 5) is None


# =============================================================================
# LexicalError Tests
# =============================================================================

class TestLexicalError:
    """Exception formatting."""

    def test_full_format(self):
        error = LexicalError(
            "invalid character '@'",
            location=SourceLocation("hello.sp", 3),
            hint="remove it",
            source_line="x = @;",
        )
        assert str(error) == (
            "hello.sp:3: error: invalid character '@'\n"
            "    x = @;\n"
            "hint: remove it"
        )

    def test_without_location(self):
        assert str(LexicalError("bad")) == "error: bad"

    def test_is_seaplus_error(self):
        assert isinstance(LexicalError("bad"), SeaPlusError)

    def test_token_error(self):
        source = "int a;\nb = 'ab';"
        token = Token(TokenKind.CHAR_LITERAL, "a", 2, LexErrorKind.UNTERMINATED_CHARACTER)
        error = token_error(token, "prog.sp", source)
        assert error.location == SourceLocation("prog.sp", 2)
        assert error.source_line == "b = 'ab';"
        assert error.message == "unterminated character literal"
        assert error.hint is not None

    def test_token_error_keeps_lexeme_case(self):
        token = Token(TokenKind.CHAR_LITERAL, "\\Q", 1, LexErrorKind.INVALID_ESCAPE_CHARACTER)
        assert token_error(token).message == "invalid escape character '\\Q'"


# =============================================================================
# Error Collection Tests
# =============================================================================

class TestErrorCollector:
    """Batch reporting."""

    def test_empty(self):
        collector = ErrorCollector()
        assert not collector.has_errors()
        collector.raise_if_errors()

    def test_report_summary(self):
        collector = ErrorCollector()
        collector.add(LexicalError("bad", SourceLocation("a.sp", 1)))
        collector.add_warning("odd", SourceLocation("a.sp", 2))
        report = collector.report()
        assert "a.sp:1: error: bad" in report
        assert "a.sp:2: warning: odd" in report
        assert report.endswith("1 error, 1 warning")

    def test_should_stop(self):
        collector = ErrorCollector(max_errors=2)
        collector.add(LexicalError("one"))
        assert not collector.should_stop()
        collector.add(LexicalError("two"))
        assert collector.should_stop()

    def test_raise_if_errors(self):
        collector = ErrorCollector()
        collector.add(LexicalError("bad"))
        with pytest.raises(LexicalErrorReport) as exc_info:
            collector.raise_if_errors()
        assert str(exc_info.value) == collector.report()

    def test_clear(self):
        collector = ErrorCollector()
        collector.add(LexicalError("bad"))
        collector.add_warning("odd")
        collector.clear()
        assert collector.error_count() == 0
        assert collector.warning_count() == 0


class TestCollectErrors:
    """Lexer.collect_errors() over real sources."""

    def test_clean_source(self):
        collector = Lexer("int x = 1;").collect_errors()
        assert not collector.has_errors()
        assert collector.warning_count() == 0

    def test_errors_and_warnings(self):
        collector = Lexer("a @ b\n1 ++ +2 /* open", "t.sp").collect_errors()
        assert collector.error_count() == 2
        assert collector.warning_count() == 1
        report = collector.report()
        assert "t.sp:1: error: invalid character '@'" in report
        assert "t.sp:2: error: consecutive operators not allowed" in report
        assert "unterminated block comment" in report

    def test_max_errors(self):
        collector = Lexer("@ @ @ @", config=LexerConfig(max_errors=2)).collect_errors()
        assert collector.error_count() == 2
