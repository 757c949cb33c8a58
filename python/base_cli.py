"""
Line-oriented command shell base class.

Subclasses receive one input line at a time and buffer their output;
the caller flushes the buffer to a console after each line.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from rich.console import Console
from rich.text import Text


class BaseCli(ABC):
    """Output buffering and run-mode flags shared by every CLI mode."""

    def __init__(self, interactive: bool = False, debug: bool = False) -> None:
        self.is_interactive = interactive
        self.is_debug = debug
        self.is_done = False
        self.output: list[str] = []

    @abstractmethod
    def process_line(self, line: str) -> None:
        """Handle one input line."""

    @abstractmethod
    def print_instructions(self) -> None:
        """Buffer usage instructions (only shown in interactive mode)."""

    def clear_output(self) -> None:
        self.output = []

    def flush(self, console: Console) -> None:
        """Print buffered output lines to the console and clear the buffer."""
        for message in self.output:
            # Messages may carry ANSI colors from simple_chalk
            console.print(Text.from_ansi(message), soft_wrap=True)
        self.clear_output()
