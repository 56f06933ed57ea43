from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console()
# keeps diagnostics out of piped JSON output
stderr = Console(stderr=True)


def print_json(data: Any) -> None:
    console.print_json(data=data)


def info(msg: str) -> None:
    stderr.print(f"[bold cyan]•[/] {escape(msg)}")


def ok(msg: str) -> None:
    stderr.print(f"[bold green]OK[/] {msg}")


def err(msg: str) -> None:
    stderr.print(f"[bold red]ERR[/] {msg}")


def print(*args, **kwargs):
    """Proxy to underlying rich Console.print()."""
    console.print(*args, **kwargs)
