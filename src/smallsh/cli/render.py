"""CLI renderer for smallsh."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


class Renderer:
    """Renders prompts and diagnostics on the error stream using Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or Console(stderr=True, highlight=False, soft_wrap=True)

    def prompt(self, text: str) -> None:
        """Render the prompt without a trailing newline."""
        self.console.print(text, end="", markup=False, emoji=False)
        self.console.file.flush()

    def newline(self) -> None:
        self.console.print()

    def error(self, message: str) -> None:
        """Render an error message."""
        self.console.print(f"[bold red]smallsh:[/bold red] {escape(message)}", emoji=False)

    def job_notice(self, message: str) -> None:
        """Render a background job state change."""
        self.console.print(message, markup=False, emoji=False)


def create_cli_renderer() -> Renderer:
    """Create and return a Renderer instance."""
    return Renderer()
