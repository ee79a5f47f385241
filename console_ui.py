#!/usr/bin/env python3
"""
Console UI Module using Rich

Styled messages, headers, the scan activity spinner and screen handling
for Megethos. Errors go to stderr, everything else to stdout.
"""

from typing import Optional

from rich import box
from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn


class ConsoleUI:
    """Console UI handler using Rich"""

    def __init__(
        self,
        force_terminal: Optional[bool] = None,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ):
        """Initialize consoles with optional terminal forcing"""
        self.console = console or Console(force_terminal=force_terminal, highlight=False)
        self.error_console = error_console or Console(stderr=True, force_terminal=force_terminal, highlight=False)

    # Basic styled output methods
    def print_error(self, message: str):
        """Print error message in red to stderr"""
        self.error_console.print(message, style="red bold", markup=False)

    def print_header(self, title: str, subtitle: Optional[str] = None):
        """Print a header with optional subtitle"""
        if subtitle:
            header_text = f"[bold]{title}[/bold]\n[dim]{escape(subtitle)}[/dim]"
        else:
            header_text = f"[bold]{title}[/bold]"

        panel = Panel(header_text, box=box.ROUNDED, padding=(0, 1))
        self.console.print(panel)

    def print_renderable(self, renderable: RenderableType):
        """Print any Rich renderable (tables, text)"""
        self.console.print(renderable)

    def create_activity_progress(self):
        """Create a Rich progress context manager for activity-only display (no counts)"""
        return Progress(
            SpinnerColumn(),
            TextColumn("{task.description}"),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        )

    # Utility methods
    def clear_screen(self):
        """Clear the console screen"""
        self.console.clear()
