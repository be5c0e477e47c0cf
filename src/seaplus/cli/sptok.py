"""
sptok - SeaPlus Tokenizer Command-Line Interface
================================================

Lists the tokens of SeaPlus source files and reports lexical errors.

Usage Examples
--------------
List the tokens of a file:
    $ sptok hello.sp

Tokenize inline source:
    $ sptok -c 'int x = 1 ++ +2;'

Only show errors, fail the build if there are any:
    $ sptok --errors-only --strict src/*.sp

Verbose mode (debug logging and an error summary):
    $ sptok -v hello.sp
"""

import logging
from pathlib import Path
from typing import Optional

import click

from seaplus import __version__
from seaplus.cli.errors import handle_cli_exception
from seaplus.config import LexerConfig
from seaplus.errors import ErrorCollector, SourceLocation
from seaplus.lexer import Lexer, format_token, token_error
from seaplus.source import read_source, strip_carriage_returns

logger = logging.getLogger(__name__)

# Listed when no input is given
DEMO_SOURCE = (
    "123 + 456 - 789\n"
    "1 ++ 2 \n"
    "int print /* this is a multi line \n"
    " comment */ myVar my_Var \n"
    " #one line comment\n"
    ' "String Literal"'
)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def list_tokens(
    lexer: Lexer,
    collector: ErrorCollector,
    errors_only: bool = False,
) -> int:
    """
    Print one line per token and record errors and warnings.

    Args:
        lexer: Lexer over the source to list
        collector: Receives a LexicalError per error token
        errors_only: Skip tokens without errors

    Returns:
        Number of error tokens seen
    """
    error_count = 0

    for token in lexer.tokenize():
        if token.is_error:
            error_count += 1
            if not collector.should_stop():
                collector.add(token_error(token, lexer.filename, lexer.source))
        elif errors_only:
            continue
        click.echo(format_token(token))

    for warning in lexer.warnings:
        location = SourceLocation(lexer.filename, warning.line)
        collector.add_warning(warning.message, location)
        click.echo(f"{location}: warning: {warning.message}", err=True)

    return error_count


@click.command()
@click.argument(
    "files",
    nargs=-1,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-c", "--source",
    type=str,
    default=None,
    help="Tokenize this text instead of (or before) FILES",
)
@click.option(
    "-e", "--errors-only",
    is_flag=True,
    help="Only list tokens that carry a lexical error",
)
@click.option(
    "--max-lexeme",
    type=click.IntRange(min=0),
    default=None,
    help="Lexeme capacity in characters, 0 for unbounded (default: 99)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 if any lexical error is found",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="sptok")
def main(
    files: tuple[Path, ...],
    source: Optional[str],
    errors_only: bool,
    max_lexeme: Optional[int],
    strict: bool,
    verbose: bool,
) -> None:
    """
    Tokenize SeaPlus source code.

    FILES are SeaPlus source files. With no FILES and no --source, a
    built-in demo program is tokenized.

    \b
    Examples:
        sptok hello.sp               # List every token
        sptok -c 'x = 1 ++ +2;'      # Tokenize inline text
        sptok -e --strict *.sp       # Errors only, fail on errors
    """
    setup_logging(verbose)

    try:
        config = LexerConfig.from_env()
        if max_lexeme is not None:
            config.max_lexeme_length = max_lexeme or None

        inputs: list[tuple[str, str]] = []
        if source is not None:
            inputs.append(("<source>", strip_carriage_returns(source)))
        for path in files:
            inputs.append((str(path), read_source(path)))
        if not inputs:
            click.echo(f"Analyzing input:\n{DEMO_SOURCE}\n")
            inputs.append(("<demo>", DEMO_SOURCE))

        collector = ErrorCollector(max_errors=config.max_errors)
        total_errors = 0

        for filename, text in inputs:
            if len(inputs) > 1:
                click.echo(f"==> {filename} <==")
            logger.debug("Tokenizing %s (%d characters)", filename, len(text))
            total_errors += list_tokens(Lexer(text, filename, config), collector, errors_only)

        # In strict mode a failing report is printed by the error handler
        if verbose and not (strict and collector.has_errors()):
            click.echo(collector.report(), err=True)
            if total_errors > collector.error_count():
                click.echo(
                    f"({total_errors - collector.error_count()} further errors not shown)",
                    err=True,
                )

        if strict:
            collector.raise_if_errors()

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
