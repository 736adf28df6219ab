"""
Gloomwood: a small text adventure engine.

A world of rooms, passages, items and actors, navigated with short
commands like "go north" or "attack bear".
"""

__version__ = "0.1.0"
