"""CLI color utilities built on rich."""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

custom_theme = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "dim": "dim white",
    "highlight": "bold cyan",
})

console = Console(theme=custom_theme)


def print_header(text: str):
    """Print a section header."""
    console.print(f"\n[bold cyan]{text}[/bold cyan]")
    console.print("[dim]" + "-" * len(text) + "[/dim]")


def print_success(text: str):
    """Print success message."""
    console.print(f"[success][OK][/success] {escape(text)}", soft_wrap=True)


def print_error(text: str):
    """Print error message."""
    console.print(f"[error][X][/error] {escape(text)}", soft_wrap=True)


def print_warning(text: str):
    """Print warning message."""
    console.print(f"[warning][!][/warning] {escape(text)}", soft_wrap=True)


def mask_key(api_key: str) -> str:
    """Mask an API key for display, keeping the first and last four characters."""
    if len(api_key) > 11:
        return api_key[:4] + "..." + api_key[-4:]
    return "***"
