"""Command-line interface for Gloomwood."""

from gloomwood.cli.repl import GameREPL, main

__all__ = ["GameREPL", "main"]
