"""Console adapter for the interactive session."""

import sys
from dataclasses import dataclass, field
from typing import Protocol, TextIO


class Console(Protocol):
    """Line-oriented text input and output."""

    def read_line(self, prompt: str) -> str:
        """Show a prompt and return the next line without its newline."""

    def write(self, text: str) -> None:
        """Write text followed by a newline."""


@dataclass
class StdConsole(Console):
    """Console backed by the process standard streams."""

    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)

    def read_line(self, prompt: str) -> str:
        """Show a prompt and read a line, raising EOFError at end of input."""
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        """Write a line of text."""
        self.stdout.write(f"{text}\n")
