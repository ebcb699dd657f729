"""
Output formatting utilities for the CLI interface.

This module provides functions for formatting output, setting up logging,
and displaying alias data as a table or as JSON.
"""

import logging
import json
from typing import List, Dict, Any, Optional

import click
from tabulate import tabulate


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Setup logging configuration for the CLI application.

    Args:
        verbose: Enable verbose (DEBUG) logging
        quiet: Suppress non-essential output (WARNING+ only)
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    # Configure root logger
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def format_table(data: List[Dict[str, Any]], headers: Optional[List[str]] = None,
                 tablefmt: str = "simple") -> str:
    """
    Format data as a table using tabulate.

    Args:
        data: List of dictionaries containing row data
        headers: Optional list of column headers (keys of the row dictionaries)
        tablefmt: Table format style

    Returns:
        Formatted table string
    """
    if headers is None:
        headers = list(data[0].keys()) if data else []

    rows = [[str(row.get(header, "")) for header in headers] for row in data]
    return tabulate(rows, headers=[header.upper() for header in headers], tablefmt=tablefmt)


def format_json(data: Any, indent: int = 2) -> str:
    """
    Format data as JSON string.

    Args:
        data: Data to format as JSON
        indent: JSON indentation level

    Returns:
        Formatted JSON string
    """
    return json.dumps(data, indent=indent, ensure_ascii=False)


def print_success(message: str) -> None:
    """Print a success message."""
    click.echo(message)


def print_error(message: str) -> None:
    """Print an error message with red X symbol."""
    click.echo(click.style(f"✗ Error: {message}", fg='red'), err=True)


def print_info(message: str) -> None:
    """Print an info message with blue info symbol."""
    click.echo(click.style(f"ℹ {message}", fg='blue'), err=True)


def print_command(binary: str, args: List[str]) -> None:
    """Echo the command line about to be run."""
    click.echo(f"> {' '.join([binary] + list(args))}")


def format_quoted(value: str) -> str:
    """Quote a value for messages: double quotes with escapes."""
    return json.dumps(value, ensure_ascii=False)
