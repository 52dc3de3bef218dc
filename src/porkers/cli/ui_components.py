"""Output helpers for the CLI (Rich).

Results are written exactly as their `str()` rendering: no markup, no
highlighting, no wrapping, so the output stays stable for scripts.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text


def print_result(console: Console, result: object) -> None:
    console.print(str(result), markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_error(console: Console, exc: BaseException) -> None:
    """Print `Error: <message>` in red."""

    message = Text("Error: ", style="bold red")
    message.append(str(exc))
    console.print(message, soft_wrap=True)
