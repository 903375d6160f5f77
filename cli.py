#!/usr/bin/env python3
"""
Item Matcher CLI

Command-line interface for finding item definitions by name pattern or id
and printing them in plain text or JSON.
"""

import logging
import sys
from typing import Tuple

import click
from tqdm.contrib.logging import logging_redirect_tqdm

from config.models import LookupConfig, MatchRequest, OutputFormat
from core.errors import ItemMatcherError
from core.formatter import format_items
from core.log import LOG_LEVELS, initialize_logging
from core.matcher import ItemMatcher

__version__ = "1.0.0"

logger = logging.getLogger(__name__)

def describe_error(error: BaseException) -> str:
    """
    Summarize an error, its cause chain and its root cause.

    Args:
        error: Raised exception

    Returns:
        str: Multi-line summary
    """
    lines = ["command execution failed:", f"error: {error}"]
    root = error
    cause = error.__cause__ or error.__context__
    while cause is not None:
        lines.append(f"caused by: {type(cause).__name__}: {cause}")
        root = cause
        cause = cause.__cause__ or cause.__context__
    lines.append(f"root cause: {type(root).__name__}: {root}")
    return '\n'.join(lines)

@click.group()
@click.option('--log-level', '-l', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default='INFO', envvar='ITEM_MATCHER_LOG_LEVEL', show_default=True,
              help='Overrides the log level')
@click.version_option(__version__)
def main(log_level: str):
    """Find and print item definitions."""
    initialize_logging(log_level)

@main.command('print-items')
@click.option('--format', '-f', 'output_format',
              type=click.Choice([f.value for f in OutputFormat]),
              default=OutputFormat.BASIC.value, show_default=True,
              help='Output format')
@click.option('--items-path', '-p', default=LookupConfig.items_path,
              envvar='ITEM_MATCHER_ITEMS_PATH', show_default=True,
              type=click.Path(file_okay=False),
              help='Directory containing item definitions')
@click.option('--regex-pattern', '--pattern', '-r', 'patterns', multiple=True,
              help='Regular expression to match against item names; repeat to match any of several')
@click.option('--id-list', '-i', 'id_lists', multiple=True, type=click.Path(dir_okay=False),
              help='JSON file holding an array of item ids; repeatable')
@click.option('--id-name-list', '-n', 'id_name_lists', multiple=True, type=click.Path(dir_okay=False),
              help='JSON file holding an array of [id, name] pairs; repeatable')
@click.option('--workers', '-w', default=-1, show_default=True,
              help='Matching threads (-1 for CPU count)')
@click.option('--no-progress', is_flag=True, help='Hide the loading progress bar')
def print_items(output_format: str, items_path: str, patterns: Tuple[str, ...],
                id_lists: Tuple[str, ...], id_name_lists: Tuple[str, ...],
                workers: int, no_progress: bool):
    """Print items found via the specified arguments."""
    config = LookupConfig(
        items_path=items_path,
        worker_threads=workers,
        show_progress=not no_progress
    )
    request = MatchRequest(
        patterns=patterns,
        id_list_paths=id_lists,
        id_name_paths=id_name_lists
    )

    try:
        with logging_redirect_tqdm():
            results = ItemMatcher(config).find_items(request)
        output = format_items(results.sorted(), OutputFormat(output_format))
        if output:
            click.echo(output)
    except ItemMatcherError as e:
        logger.debug("Lookup failed", exc_info=True)
        click.echo(describe_error(e), err=True)
        sys.exit(1)

    logger.info("done, command executed successfully!")

if __name__ == "__main__":
    main()
