"""
minic - Lexical Front End for a Tiny C-like Language
====================================================

This package provides the lexical-analysis stage of a small C-like
language front end. It turns raw source text into a stream of classified
tokens for a later parsing stage.

Main Components
---------------
- **lexer**: Character classification and tokenization
    Lexer, TokenStream, Token, TokenKind, lex(), lex_file()

- **config**: Lexer options (LexerOptions)

- **errors**: Exception hierarchy (MiniCError and subclasses)

- **cli**: Command-line tools (mclex)

Quick Start
-----------
Lex a string:
    >>> from minic import lex
    >>> tokens = lex("int main() { return 0; }")
    >>> [t.kind.name for t in tokens][:3]
    ['INT_KEYWORD', 'IDENTIFIER', 'LPAREN']

Lex a file:
    >>> from minic import lex_file
    >>> tokens = lex_file("main.c")

Or use the command-line tool:
    $ mclex main.c
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from minic.config import LexerOptions
from minic.errors import (
    MiniCError,
    LexError,
    SourceLocation,
    SourceUnavailableError,
    TokenTooLongError,
)
from minic.lexer import (
    Lexer,
    Token,
    TokenKind,
    TokenStream,
    lex,
    lex_file,
)

__all__ = [
    # Version
    "__version__",
    # Lexer
    "Lexer",
    "Token",
    "TokenKind",
    "TokenStream",
    "lex",
    "lex_file",
    # Configuration
    "LexerOptions",
    # Errors
    "MiniCError",
    "LexError",
    "SourceLocation",
    "SourceUnavailableError",
    "TokenTooLongError",
]
