# =============================================================================
# test_source.py - Source Acquisition Tests
# =============================================================================

import pytest

from seaplus.errors import SeaPlusError, SourceReadError
from seaplus.lexer import Lexer, LexErrorKind, TokenKind
from seaplus.source import decode_source, read_source, strip_carriage_returns


class TestDecoding:
    """Carriage returns and single-byte decoding."""

    def test_strip_carriage_returns(self):
        assert strip_carriage_returns("a\r\nb\r") == "a\nb"

    def test_decode_crlf(self):
        assert decode_source(b"int x;\r\nx = 1;\r\n") == "int x;\nx = 1;\n"

    def test_every_byte_is_one_character(self):
        data = bytes(range(256)).replace(b"\r", b"")
        text = decode_source(data)
        assert len(text) == len(data)


class TestReadSource:
    """Reading files from disk."""

    def test_read_file(self, tmp_path):
        path = tmp_path / "prog.sp"
        path.write_bytes(b"int a;\r\nint b;\r\n")
        assert read_source(path) == "int a;\nint b;\n"

    def test_crlf_file_has_no_invalid_chars(self, tmp_path):
        path = tmp_path / "prog.sp"
        path.write_bytes(b"a\r\nb\r\n")
        tokens = list(Lexer(read_source(path)).tokenize())
        assert all(t.error == LexErrorKind.NONE for t in tokens)
        assert [t.line for t in tokens if t.kind == TokenKind.IDENTIFIER] == [1, 2]

    def test_high_bytes(self, tmp_path):
        path = tmp_path / "prog.sp"
        path.write_bytes(b"x \xff y")
        tokens = list(Lexer(read_source(path)).tokenize())
        assert tokens[1].error == LexErrorKind.INVALID_CHAR
        assert tokens[2].lexeme == "y"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceReadError) as exc_info:
            read_source(tmp_path / "missing.sp")
        assert "missing.sp" in str(exc_info.value)
        assert isinstance(exc_info.value, SeaPlusError)
