"""Shared rich consoles for user-facing output."""

from rich.console import Console

# Messages carry remote and user text; no markup or emoji codes.
console = Console(highlight=False, markup=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, markup=False, emoji=False, soft_wrap=True)
