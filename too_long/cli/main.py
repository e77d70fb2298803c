"""Main CLI entry point for too-long."""

import logging
import sys

import click
from rich.console import Console

from .. import __version__
from ..core.checker import LineLimitChecker
from ..core.constants import (
    DEFAULT_MAX_LINES,
    ENV_EXCLUDE_PATTERN,
    ENV_INCLUDE_PATTERN,
    ENV_MAX_LINES,
    ENV_PATH,
    ENV_VERBOSE,
    FAILURE_HEADER,
    LOG_FORMAT,
    SUCCESS_MESSAGE,
)
from ..core.exceptions import CheckError
from ..models import CheckRequest, CheckResult


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def print_report(console: Console, result: CheckResult) -> None:
    """Print the success message, or the failing files one per line."""
    if result.passed:
        console.print(SUCCESS_MESSAGE, style="green")
        return

    console.print(FAILURE_HEADER, style="bold red")
    for record in result.failures:
        click.echo(str(record))


@click.command()
@click.argument('paths', nargs=-1, required=True, type=click.Path(), envvar=ENV_PATH)
@click.option('--max-lines', '-m', type=click.IntRange(min=0), default=DEFAULT_MAX_LINES,
              envvar=ENV_MAX_LINES, show_default=True, help='Maximum allowed lines per file')
@click.option('--include-pattern', '-i', default='', envvar=ENV_INCLUDE_PATTERN,
              help='Only check paths matching this regular expression')
@click.option('--exclude-pattern', '-e', default='', envvar=ENV_EXCLUDE_PATTERN,
              help='Skip paths matching this regular expression')
@click.option('--verbose', '-v', is_flag=True, envvar=ENV_VERBOSE, help='Log skipped and unreadable files')
@click.version_option(__version__, prog_name='too-long')
@click.pass_context
def cli(ctx, paths, max_lines, include_pattern, exclude_pattern, verbose):
    """Verify that the files under PATHS don't exceed a maximum number of lines"""
    setup_logging(verbose)
    console = Console(soft_wrap=True, highlight=False, emoji=False)

    request = CheckRequest(
        paths=list(paths),
        max_lines=max_lines,
        include_pattern=include_pattern,
        exclude_pattern=exclude_pattern,
    )

    try:
        checker = LineLimitChecker(request)
    except CheckError as e:
        console.print(str(e), style="red", markup=False)
        ctx.exit(1)

    result = checker.run()
    print_report(console, result)
    ctx.exit(0 if result.passed else 1)


if __name__ == '__main__':
    cli()
