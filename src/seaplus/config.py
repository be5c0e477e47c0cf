"""
SeaPlus Lexer Configuration
===========================

Lexer settings. Configuration can come from:
- Default values (defined here)
- Environment variables (LexerConfig.from_env)
- Command-line options (the sptok tool overrides fields directly)

Environment variables:
    SEAPLUS_MAX_LEXEME: Lexeme capacity in characters ("0" or "none" = unbounded)
    SEAPLUS_MAX_ERRORS: Errors collected before a report stops growing
"""

from dataclasses import dataclass
from typing import Optional
import logging
import os

logger = logging.getLogger(__name__)

# Capacity of a single lexeme; longer runs are split or truncated.
DEFAULT_MAX_LEXEME_LENGTH = 99

DEFAULT_MAX_ERRORS = 100


@dataclass
class LexerConfig:
    """
    Configuration for a tokenization pass.

    Attributes:
        max_lexeme_length: Longest lexeme the scanner will build. Number and
            identifier runs longer than this are split across tokens, string
            literals are cut off without error. None means unbounded.
        max_errors: Errors collected by Lexer.collect_errors before stopping
    """

    max_lexeme_length: Optional[int] = DEFAULT_MAX_LEXEME_LENGTH
    max_errors: int = DEFAULT_MAX_ERRORS

    def __post_init__(self) -> None:
        if self.max_lexeme_length is not None and self.max_lexeme_length < 1:
            raise ValueError(
                f"max_lexeme_length must be positive or None, got {self.max_lexeme_length}"
            )
        if self.max_errors < 1:
            raise ValueError(f"max_errors must be positive, got {self.max_errors}")

    @classmethod
    def from_env(cls) -> "LexerConfig":
        """
        Create LexerConfig from environment variables.

        Malformed values are logged and ignored.

        Returns:
            LexerConfig with values from environment variables
        """
        config = cls()

        if raw := os.environ.get("SEAPLUS_MAX_LEXEME"):
            if raw.strip().lower() in ("0", "none"):
                config.max_lexeme_length = None
            else:
                try:
                    value = int(raw)
                except ValueError:
                    logger.warning("Ignoring invalid SEAPLUS_MAX_LEXEME=%r", raw)
                else:
                    if value > 0:
                        config.max_lexeme_length = value
                    else:
                        logger.warning("Ignoring negative SEAPLUS_MAX_LEXEME=%r", raw)

        if raw := os.environ.get("SEAPLUS_MAX_ERRORS"):
            try:
                value = int(raw)
            except ValueError:
                logger.warning("Ignoring invalid SEAPLUS_MAX_ERRORS=%r", raw)
            else:
                if value > 0:
                    config.max_errors = value
                else:
                    logger.warning("Ignoring non-positive SEAPLUS_MAX_ERRORS=%r", raw)

        return config
