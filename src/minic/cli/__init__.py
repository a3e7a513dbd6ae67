"""
minic Command-Line Interface
============================

This package provides command-line tools for minic:

- **mclex**: Lexer driver that prints the tokens of a source file

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["mclex"]
