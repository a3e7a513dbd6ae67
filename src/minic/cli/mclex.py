"""
mclex - minic Lexer Command-Line Interface
==========================================

This module implements the command-line interface for the minic lexer.
It reads one source file and prints its tokens, one per line.

Usage Examples
--------------
Print tokens:
    $ mclex main.c

Original numeric format:
    $ mclex --numeric main.c

With source positions:
    $ mclex --positions main.c

Verbose mode:
    $ mclex -v main.c
"""

import logging
from pathlib import Path
from typing import Optional

import click

from minic import __version__
from minic.cli.errors import handle_cli_exception
from minic.config import LexerOptions
from minic.lexer import lex_file

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(path_type=Path),
)
@click.option(
    "--numeric",
    is_flag=True,
    help="Print kinds as integer discriminants ('Type: N, Value: text')",
)
@click.option(
    "--positions",
    is_flag=True,
    help="Prefix each token with its line:column",
)
@click.option(
    "--max-token-length",
    type=click.IntRange(min=0),
    default=None,
    help="Longest identifier or number accepted (0 = unlimited). "
         "Default: $MINIC_MAX_TOKEN_LENGTH or 255.",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="mclex")
def main(
    input_file: Path,
    numeric: bool,
    positions: bool,
    max_token_length: Optional[int],
    verbose: bool,
) -> None:
    """
    Print the tokens of a minic source file.

    INPUT_FILE is the source file to lex.

    \b
    Examples:
        mclex main.c                 # KIND and text per line
        mclex --numeric main.c       # Type: N, Value: text
        mclex --positions main.c     # line:column prefix
    """
    setup_logging(verbose)

    options = LexerOptions.from_env()
    if max_token_length is not None:
        options.max_token_length = max_token_length or None
    logger.debug(f"Max token length: {options.max_token_length or 'unlimited'}")

    try:
        tokens = lex_file(input_file, options)
    except Exception as e:
        handle_cli_exception(e, verbose)

    for line in tokens.format_lines(numeric=numeric, positions=positions):
        click.echo(line)

    if verbose:
        click.echo(f"Lexed {len(tokens)} tokens from {input_file}", err=True)


if __name__ == "__main__":
    main()
