"""Rich console helpers for CLI output.

Results go to stdout; errors go to stderr so piped JSON stays clean.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape

_out = Console(highlight=False)
_err = Console(stderr=True, highlight=False)


def print(*objects: Any, **kwargs: Any) -> None:  # noqa: A001
    _out.print(*objects, **kwargs)


def header(text: str) -> None:
    _out.print(f"\n[bold cyan]{escape(text)}[/bold cyan]")
    _out.rule(style="cyan")


def subheader(text: str) -> None:
    _out.print(f"[bold]{escape(text)}[/bold]")


def key_value(key: str, value: Any) -> None:
    _out.print(f"  [dim]{escape(key)}:[/dim] {escape(str(value))}")


def info(text: str) -> None:
    _out.print(f"[blue]•[/blue] {escape(text)}")


def success(text: str) -> None:
    _out.print(f"[green]✓[/green] {escape(text)}")


def dim(text: str) -> None:
    _out.print(f"[dim]{escape(text)}[/dim]")


def error(text: str) -> None:
    _err.print(f"[bold red]error:[/bold red] {escape(text)}")


def json(data: str) -> None:
    # plain write; rich would wrap long lines
    _out.file.write(data + "\n")
