"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Converted HTML and text are written verbatim; document trees are printed as
JSON. Messages are shown literally, so paths with brackets are not read
as Rich markup. Supports verbosity levels and the --no-color flag.
"""

import json
from typing import Any

from rich.console import Console
from rich.markup import escape


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console for results (stdout)
        err_console: Rich Console for messages (stderr)

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.print_json([{"type": "paragraph", "children": []}])
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(no_color=no_color, highlight=False, soft_wrap=True)
        self.err_console = Console(stderr=True, no_color=no_color, highlight=False)

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.err_console.print(f"[red]✗[/red] {escape(message)}", style="red", markup=True)

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.err_console.print(escape(message))

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.err_console.print(f"[dim]{escape(message)}[/dim]")

    def print_text(self, text: str) -> None:
        """Write converted text to stdout without markup processing."""
        self.console.print(text, markup=False, emoji=False)

    def print_json(self, data: Any, indent: int = 2) -> None:
        """Write data to stdout as JSON.

        Args:
            data: JSON-serializable data
            indent: Indentation; 0 prints compact single-line JSON
        """
        text = json.dumps(data, indent=indent or None, ensure_ascii=False)
        self.print_text(text)
