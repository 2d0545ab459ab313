"""Console utility functions for formatting and output."""

from typing import Any, Iterable

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table


# Status symbols for consistent iconography
STATUS_SYMBOLS = {
    'success': '✨',
    'running': '🚀',
    'info': '💡',
    'warning': '⚠️',
    'error': '❌',
    'check': '✅',
    'list': '📋',
    'preview': '👀',
}


def _get_console(stderr: bool = False) -> Console:
    """Get a Rich console bound to the current stdout/stderr."""
    return Console(stderr=stderr, soft_wrap=True)


def _rich_echo(message: str, color: str = "white", bold: bool = False, symbol: str = None, stderr: bool = False):
    """Echo message with Rich formatting."""
    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"

    style_str = f"bold {color}" if bold else color
    _get_console(stderr=stderr).print(message, style=style_str, markup=False, highlight=False)


def _rich_success(message: str, symbol: str = None):
    """Display success message with green color and bold styling."""
    _rich_echo(message, color="green", symbol=symbol, bold=True)


def _rich_error(message: str, symbol: str = None):
    """Display error message with red color on stderr."""
    _rich_echo(message, color="red", symbol=symbol, stderr=True)


def _rich_warning(message: str, symbol: str = None):
    """Display warning message with yellow color."""
    _rich_echo(message, color="yellow", symbol=symbol)


def _rich_info(message: str, symbol: str = None):
    """Display info message with blue color."""
    _rich_echo(message, color="blue", symbol=symbol)


def _rich_panel(content: Any, title: str = None, style: str = "cyan"):
    """Display content in a Rich panel."""
    _get_console().print(Panel(content, title=title, border_style=style, padding=(0, 1)))


def _create_files_table(rows: Iterable[Iterable[Any]], columns: Iterable[str], title: str = "Files") -> Table:
    """Create a Rich table for file display.

    The first column is rendered bold; every cell is converted with ``str``.
    """
    table = Table(title=f"{STATUS_SYMBOLS['list']} {title}", show_header=True, header_style="bold cyan")
    for i, column in enumerate(columns):
        table.add_column(column, style="bold white" if i == 0 else "white")
    for row in rows:
        table.add_row(*(str(cell) for cell in row))
    return table


def _print_table(table: Table):
    """Print a table, falling back to plain click output for empty tables."""
    if not table.row_count:
        click.echo("(no entries)")
        return
    _get_console().print(table)
