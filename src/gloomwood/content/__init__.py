"""
Game content for Gloomwood.

Provides the built-in world and loading of world descriptions from disk.
"""

from gloomwood.content.default_world import INTRO, create_default_world
from gloomwood.content.loader import WorldLoadError, initial_world, load_world, save_world

__all__ = [
    "INTRO",
    "WorldLoadError",
    "create_default_world",
    "initial_world",
    "load_world",
    "save_world",
]
