"""Console utility functions for formatting and output."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.theme import Theme


# Status symbols for consistent iconography
STATUS_SYMBOLS = {
    'success': '✨',
    'info': '💡',
    'warning': '⚠️',
    'error': '❌',
    'check': '✅',
    'clock': '⏱️',
}

_THEME = Theme({
    "info": "blue",
    "warning": "yellow",
    "error": "red",
    "success": "bold green",
    "title": "cyan",
})

_console: Optional[Console] = None


def _get_console() -> Console:
    """Get the shared Rich console, creating it on first use."""
    global _console
    if _console is None:
        _console = Console(theme=_THEME)
    return _console


def _rich_echo(message: str, style: str = "white", symbol: str = None):
    """Echo message with a Rich style or a theme style name."""
    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"

    _get_console().print(message, style=style, markup=False, highlight=False, soft_wrap=True)


def _rich_success(message: str, symbol: str = None):
    """Display success message with green color and bold styling."""
    _rich_echo(message, style="success", symbol=symbol)


def _rich_error(message: str, symbol: str = None):
    """Display error message with red color."""
    _rich_echo(message, style="error", symbol=symbol)


def _rich_warning(message: str, symbol: str = None):
    """Display warning message with yellow color."""
    _rich_echo(message, style="warning", symbol=symbol)


def _rich_info(message: str, symbol: str = None):
    """Display info message with blue color."""
    _rich_echo(message, style="info", symbol=symbol)


def _rich_panel(content, title: str = None, style: str = "title"):
    """Display content in a Rich panel."""
    _get_console().print(Panel(content, title=title, border_style=style, padding=(0, 1)))
