"""
minic Lexer (Tokenizer)
=======================

This module implements the lexer for the minic language, a tiny C-like
subset. It converts source text into a TokenStream for a later parsing
stage.

Token Categories
----------------
- Keywords: int, return
- Identifiers: an ASCII letter followed by letters and digits (no '_')
- Integer literals: runs of decimal digits (no sign, point or exponent)
- Delimiters: (, ), {, }, ;
- Unknown: any other single non-whitespace character, passed through

The lexer is deliberately permissive: characters it does not recognise
become UNKNOWN tokens rather than errors, leaving rejection of invalid
syntax to the parser.

Run Termination
---------------
Identifier and digit runs end at the first character that cannot extend
them. That character is pushed back onto the input so the main loop
classifies it normally; in "main()" the '(' after "main" becomes its own
token.

Example Usage
-------------
>>> from minic.lexer import lex
>>> for token in lex('int main() { return 0; }'):
...     print(token)
Token(INT_KEYWORD, 'int', 1:1)
Token(IDENTIFIER, 'main', 1:5)
Token(LPAREN, '(', 1:9)
Token(RPAREN, ')', 1:10)
Token(LBRACE, '{', 1:12)
Token(RETURN_KEYWORD, 'return', 1:14)
Token(INT_LITERAL, '0', 1:21)
Token(SEMICOLON, ';', 1:22)
Token(RBRACE, '}', 1:24)
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, TextIO
import io
import logging
import string

from minic.config import LexerOptions
from minic.errors import (
    SourceLocation,
    SourceUnavailableError,
    TokenTooLongError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token kinds for the minic language.

    The set is closed. Values are the integer discriminants shown by the
    numeric token dump (``mclex --numeric``).
    """

    # === Keywords ===
    INT_KEYWORD = 0         # int
    RETURN_KEYWORD = 1      # return

    # === Identifiers ===
    IDENTIFIER = 2          # Variable/function names

    # === Delimiters ===
    LPAREN = 3              # (
    RPAREN = 4              # )
    LBRACE = 5              # {
    RBRACE = 6              # }

    # === Literals ===
    INT_LITERAL = 7         # Decimal digit runs

    SEMICOLON = 8           # ;

    # === Fallback ===
    UNKNOWN = 9             # Any other single character


# Map keyword strings to their token kinds
KEYWORDS: dict[str, TokenKind] = {
    "int": TokenKind.INT_KEYWORD,
    "return": TokenKind.RETURN_KEYWORD,
}

# Single character tokens
PUNCTUATION: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ";": TokenKind.SEMICOLON,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    Represents a single token from minic source code.

    Attributes:
        kind: The TokenKind classification
        text: The exact source text of the token
        line: Line number of the first character (1-indexed)
        column: Column number of the first character (1-indexed)
        filename: Name of the source file
    """
    kind: TokenKind
    text: str
    line: int = 1
    column: int = 1
    filename: str = "<input>"

    def __repr__(self) -> str:
        """Format token for debugging output."""
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)


# =============================================================================
# Token Stream
# =============================================================================

class TokenStream:
    """
    Ordered, append-only collection of tokens produced by one lexing call.

    Insertion order is source order. Tokens can be read by index, sliced
    or iterated, but never removed or replaced.
    """

    def __init__(self) -> None:
        self._tokens: list[Token] = []

    def append(self, token: Token) -> None:
        """Add a token to the end of the stream."""
        self._tokens.append(token)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __getitem__(self, index):
        # Slices come back as a new list, so the stream itself stays intact
        return self._tokens[index]

    def __repr__(self) -> str:
        return f"TokenStream({len(self._tokens)} tokens)"

    def kinds(self) -> list[TokenKind]:
        """Return the kind of every token, in order."""
        return [token.kind for token in self._tokens]

    def texts(self) -> list[str]:
        """Return the text of every token, in order."""
        return [token.text for token in self._tokens]

    def format_lines(self, numeric: bool = False, positions: bool = False) -> list[str]:
        """
        Render the stream one line per token for diagnostics.

        The default form shows the kind name and text:

            INT_KEYWORD    int

        With ``numeric`` the kind is shown as its integer discriminant:

            Type: 0, Value: int

        With ``positions`` each line starts with ``line:column``.
        """
        return [format_token(token, numeric, positions) for token in self._tokens]


def format_token(token: Token, numeric: bool = False, positions: bool = False) -> str:
    """Render a single token as one diagnostic line."""
    if numeric:
        line = f"Type: {token.kind.value}, Value: {token.text}"
    else:
        line = f"{token.kind.name:<14} {token.text}"

    if positions:
        line = f"{token.line}:{token.column}".ljust(8) + line

    return line


# =============================================================================
# Character Source
# =============================================================================

class CharReader:
    """
    Reads a text stream one character at a time with one character of
    pushback.

    Tracks the line and column of the next character to be read. Pushing
    a character back restores the position it was read from, so the
    character is reported at the same place when read again.

    Attributes:
        filename: Name of the source (for error reporting)
        line: Line of the next character (1-indexed)
        column: Column of the next character (1-indexed)
    """

    def __init__(self, stream: TextIO, filename: str = "<input>"):
        self._stream = stream
        self.filename = filename

        self.line = 1
        self.column = 1

        self._pushback: Optional[str] = None
        self._previous_position = (1, 1)

    def read(self) -> str:
        """
        Consume and return the next character.

        Returns:
            A single character, or "" at end of input

        Raises:
            SourceUnavailableError: If the underlying stream fails
        """
        if self._pushback is not None:
            char, self._pushback = self._pushback, None
        else:
            try:
                char = self._stream.read(1)
            except (OSError, UnicodeDecodeError) as e:
                raise SourceUnavailableError(self.filename, str(e)) from e

        if char:
            self._advance(char)
        return char

    def unread(self, char: str) -> None:
        """
        Push the most recently read character back onto the input.

        Raises:
            ValueError: If a character is already pushed back
        """
        if self._pushback is not None:
            raise ValueError("only one character of pushback is supported")

        self._pushback = char
        self.line, self.column = self._previous_position

    def _advance(self, char: str) -> None:
        self._previous_position = (self.line, self.column)

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes minic source code.

    The whole source is consumed in a single left-to-right pass with at
    most one character of pushback. A Lexer instance lexes its source
    once; create a new one for each source.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = lexer.tokenize()

    Attributes:
        filename: Name of the source file (for error reporting)
        options: LexerOptions in effect
    """

    # C isspace() in the "C" locale
    WHITESPACE = " \t\n\v\f\r"

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits

    DIGITS = string.digits

    def __init__(
        self,
        source: str | TextIO,
        filename: str = "<input>",
        options: Optional[LexerOptions] = None,
    ):
        """
        Initialize the lexer with source code.

        Args:
            source: Source text, or a readable text stream
            filename: Name of the source (for error messages)
            options: Lexer options (defaults to LexerOptions())
        """
        if isinstance(source, str):
            source = io.StringIO(source)

        self.filename = filename
        self.options = options or LexerOptions()
        self._reader = CharReader(source, filename)

    def tokenize(self) -> TokenStream:
        """
        Lex the entire source.

        Returns:
            TokenStream with every token in source order. No end-of-input
            token is appended.

        Raises:
            SourceUnavailableError: If the source cannot be read
            TokenTooLongError: If a run exceeds options.max_token_length
        """
        tokens = TokenStream()

        while True:
            line = self._reader.line
            column = self._reader.column

            char = self._reader.read()
            if not char:
                break

            if char in self.WHITESPACE:
                continue

            if char in self.IDENT_START:
                text = self._scan_run(char, self.IDENT_CHARS, line, column)
                kind = KEYWORDS.get(text, TokenKind.IDENTIFIER)
            elif char in self.DIGITS:
                text = self._scan_run(char, self.DIGITS, line, column)
                kind = TokenKind.INT_LITERAL
            else:
                text = char
                kind = PUNCTUATION.get(char, TokenKind.UNKNOWN)
                if kind is TokenKind.UNKNOWN:
                    logger.debug(f"Unknown character {char!r} at {self.filename}:{line}:{column}")

            tokens.append(Token(kind, text, line, column, self.filename))

        logger.debug(f"Lexed {len(tokens)} tokens from {self.filename}")
        return tokens

    def _scan_run(self, first: str, allowed: str, line: int, column: int) -> str:
        """
        Accumulate a run of characters from ``allowed`` starting with
        ``first``.

        The character that ends the run is pushed back for the main loop.
        """
        limit = self.options.max_token_length
        chars = [first]

        while True:
            char = self._reader.read()
            if not char or char not in allowed:
                break

            chars.append(char)
            if limit is not None and len(chars) > limit:
                raise TokenTooLongError(
                    limit,
                    SourceLocation(self.filename, line, column),
                )

        if char:
            self._reader.unread(char)

        return "".join(chars)


# =============================================================================
# Convenience Functions
# =============================================================================

def lex(
    source: str | TextIO,
    filename: str = "<input>",
    options: Optional[LexerOptions] = None,
) -> TokenStream:
    """
    Lex source text or an open text stream.

    Streams are read to the end but not closed; the caller owns them.

    Args:
        source: Source text, or a readable text stream
        filename: Name used in token locations and error messages
        options: Lexer options

    Returns:
        TokenStream in source order
    """
    return Lexer(source, filename, options).tokenize()


def lex_file(path: str | Path, options: Optional[LexerOptions] = None) -> TokenStream:
    """
    Lex a source file.

    The file is read as single-byte (latin-1) text so every byte is one
    character, and it is closed on every exit path.

    Args:
        path: Path of the source file
        options: Lexer options

    Returns:
        TokenStream in source order

    Raises:
        SourceUnavailableError: If the file cannot be opened or read
        TokenTooLongError: If a run exceeds options.max_token_length
    """
    filename = str(path)

    try:
        handle = open(path, "r", encoding="latin-1", newline="")
    except OSError as e:
        raise SourceUnavailableError(filename, e.strerror or str(e)) from e

    with handle:
        logger.debug(f"Opened {filename}")
        return Lexer(handle, filename, options).tokenize()
