"""Consolidated display utilities for CLI commands."""
from typing import Any, Dict

from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def error(message: str) -> None:
    """Print error message."""
    err_console.print(f"[red]❌ {message}[/red]")


def section(title: str) -> None:
    """Print section header."""
    err_console.print(f"\n[bold]{title}[/bold]")


def info_dict(data: Dict[str, Any], indent: str = "  ") -> None:
    """Print a dictionary as indented key-value pairs."""
    for key, value in data.items():
        err_console.print(f"{indent}{key}: {value}")


def table(title: str, columns: list[str], rows: list[tuple]) -> None:
    """Print rows as a rich table."""
    t = Table(title=title)
    for column in columns:
        t.add_column(column)
    for row in rows:
        t.add_row(*(str(v) for v in row))
    console.print(t)
