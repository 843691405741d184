"""Shared rich consoles."""

from rich.console import Console

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)
