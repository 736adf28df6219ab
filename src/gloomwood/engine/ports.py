"""
Input ports for Gloomwood.

Anything that needs to ask the player for another line (the combat
loop, the REPL prompts) goes through an InputPort so it can be driven
by a script in tests.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


class InputPort(Protocol):
    """Interface for reading player input and showing intermediate output."""

    def read_line(self, prompt: str) -> str:
        """Block until the player enters a line. Raises EOFError when input ends."""
        ...

    def write(self, text: str) -> None:
        """Show text to the player immediately."""
        ...


class ConsolePort:
    """Port backed by stdin/stdout."""

    def read_line(self, prompt: str) -> str:
        return input(prompt)

    def write(self, text: str) -> None:
        print(text)


class ScriptedInput:
    """
    Port that replays a fixed list of lines and records everything written.

    Raises EOFError once the script runs out, like a closed stdin.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def feed(self, *lines: str) -> None:
        self._lines.extend(lines)

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError("script exhausted")
        return self._lines.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def remaining(self) -> int:
        return len(self._lines)

    @property
    def transcript(self) -> str:
        return "\n".join(self.output)
