"""
Source Acquisition
==================

Reading SeaPlus source files into the form the scanner expects.

The scanner works on single-byte characters and does not treat carriage
returns as whitespace, so sources are read as raw bytes, stripped of
'\\r', and decoded as Latin-1 (every byte becomes exactly one character).
"""

from pathlib import Path
from typing import Union
import logging

from seaplus.errors import SourceReadError

logger = logging.getLogger(__name__)

SOURCE_ENCODING = "latin-1"


def strip_carriage_returns(text: str) -> str:
    """Remove every carriage return, turning CRLF line endings into LF."""
    return text.replace("\r", "")


def decode_source(data: bytes) -> str:
    """Strip carriage returns from raw bytes and decode one byte per character."""
    return data.replace(b"\r", b"").decode(SOURCE_ENCODING)


def read_source(path: Union[str, Path]) -> str:
    """
    Read a source file for scanning.

    Args:
        path: File to read

    Returns:
        The decoded source text with carriage returns removed

    Raises:
        SourceReadError: If the file cannot be read
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceReadError(str(path), e.strerror or str(e)) from e

    logger.debug("Read %d bytes from %s", len(data), path)
    return decode_source(data)
