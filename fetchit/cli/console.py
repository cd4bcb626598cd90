"""Console utilities for the fetchit CLI.

Wraps Rich's Console with the theme and message helpers used by the
download command.
"""

from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.theme import Theme


class FetchConsole(RichConsole):
    """Rich console with fetchit styling helpers."""

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the console with the fetchit theme.

        Args:
            **kwargs: Additional arguments to pass to the Rich Console
        """
        theme = Theme(
            {
                "info": "bold cyan",
                "warning": "yellow",
                "error": "bold red",
                "success": "green",
                "path": "cyan",
                "hint": "italic dim",
                "debug": "dim",
            }
        )
        super().__init__(theme=theme, **kwargs)

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.print(f"[warning]{escape(message)}[/]")

    def error(self, message: str) -> None:
        """Print an error message.

        Args:
            message: The error message to print
        """
        self.print(f"[error]ERROR:[/] [italic]{escape(message)}[/]")

    def saved(self, size: str, path: str) -> None:
        """Print the summary line for a file written to disk.

        Args:
            size: Human-readable size of the file
            path: Where the file was written
        """
        self.print(f"[success]Saved {size} to[/] [path]{escape(path)}[/]")

    def request_sent(self) -> None:
        """Print the banner shown once the request has gone out."""
        self.print(
            "[info]HTTP:[/] [italic]Request sent...[/] "
            "[hint]it'll take a few seconds, but we will do the heavy lifting[/]\n"
        )


def debug_print(msg: str, debug: bool = False) -> None:
    """Print debug message if debug mode is enabled."""
    if debug:
        console.print(f"[debug]DEBUG: {escape(msg)}[/]")


# Create a default console instance for easy import
console = FetchConsole()
