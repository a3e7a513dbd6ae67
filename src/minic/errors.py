"""
minic Error Hierarchy
=====================

This module defines the exception hierarchy for the minic front end.
All exceptions inherit from MiniCError, allowing callers to catch all
front-end errors with a single except clause if desired.

Exception Hierarchy
-------------------
MiniCError (base)
└── LexError (lexer-related)
    ├── SourceUnavailableError - source cannot be opened or read
    └── TokenTooLongError - identifier or digit run exceeds the limit

Unrecognized characters are deliberately NOT errors: the lexer emits
them as UNKNOWN tokens and leaves rejection to a later stage.

Error Message Format
--------------------
Errors that know where they happened follow this format:

    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing

Example:
    main.c:3:5: error: token exceeds maximum length of 255 characters
    hint: shorten the identifier or raise --max-token-length
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Base Exception Class
# =============================================================================

class MiniCError(Exception):
    """
    Base exception for all minic errors.

    Provides common functionality for error messages including source
    location tracking, source line context, and helpful hints.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
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

        Example output:
            main.c:2:9: error: token exceeds maximum length of 8 characters
                int verylongname;
                    ^
            hint: shorten the identifier or raise --max-token-length
        """
        parts = []

        # Location prefix
        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexError(MiniCError):
    """
    Base exception for all lexer-related errors.

    The lexer performs no retries and no internal recovery: any LexError
    ends the lexing call and no partial token stream is returned.
    """
    pass


class SourceUnavailableError(LexError):
    """
    The character source cannot be opened or read.

    Raised for missing files, permission problems, directories given in
    place of files, and I/O failures while reading. Fatal to the lexing
    call; reporting it to the user is the caller's job.

    Attributes:
        source: The path or name of the source that failed
        reason: Short description of the underlying failure
    """

    def __init__(self, source: str, reason: Optional[str] = None):
        self.source = source
        self.reason = reason
        message = f"cannot read source '{source}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class TokenTooLongError(LexError):
    """
    An identifier or integer literal run exceeded the configured limit.

    The location points at the first character of the offending run, so
    a caller that wants to skip the token can report it precisely.

    Attributes:
        limit: The maximum token length that was exceeded
    """

    def __init__(
        self,
        limit: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.limit = limit
        super().__init__(
            f"token exceeds maximum length of {limit} characters",
            location=location,
            hint="shorten the identifier or raise --max-token-length",
            source_line=source_line,
        )
