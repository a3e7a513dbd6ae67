"""
minic Lexer Configuration
=========================

Options that control the lexer. Configuration can come from:
- Default values (defined here)
- Environment variables (LexerOptions.from_env)
- Command-line flags (applied by mclex on top of the environment)

Environment variables (all optional):
    MINIC_MAX_TOKEN_LENGTH: Longest identifier or digit run accepted.
                            "0" or "none" removes the limit.
"""

from dataclasses import dataclass
from typing import Optional
import logging
import os

logger = logging.getLogger(__name__)


# Longest run the original fixed 256-byte buffer could hold, less its
# terminator.
DEFAULT_MAX_TOKEN_LENGTH = 255


@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        max_token_length: Longest identifier or integer literal run the
                          lexer accepts before raising TokenTooLongError.
                          None means runs may grow without bound.
    """
    max_token_length: Optional[int] = DEFAULT_MAX_TOKEN_LENGTH

    def __post_init__(self) -> None:
        if self.max_token_length is not None and self.max_token_length < 1:
            raise ValueError(
                f"max_token_length must be positive or None, got {self.max_token_length}"
            )

    @classmethod
    def from_env(cls) -> "LexerOptions":
        """
        Create LexerOptions from environment variables.

        Invalid values are ignored and the default is kept.

        Returns:
            LexerOptions with values from environment variables
        """
        options = cls()

        if raw := os.environ.get("MINIC_MAX_TOKEN_LENGTH"):
            options.max_token_length = parse_max_token_length(raw, options.max_token_length)

        return options


def parse_max_token_length(raw: str, default: Optional[int]) -> Optional[int]:
    """
    Parse a max token length setting.

    "0" and "none" (any case) mean unbounded. Anything that is not a
    non-negative integer logs a warning and returns ``default``.
    """
    value = raw.strip().lower()
    if value == "none":
        return None

    try:
        length = int(value)
    except ValueError:
        logger.warning(f"Ignoring invalid MINIC_MAX_TOKEN_LENGTH {raw!r}")
        return default

    if length < 0:
        logger.warning(f"Ignoring negative MINIC_MAX_TOKEN_LENGTH {raw!r}")
        return default

    return length or None
