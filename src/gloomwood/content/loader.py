"""
World loading for Gloomwood.

Worlds are stored as JSON documents with the same shape as the World
model. A file that cannot be read or does not describe a valid world is
a hard failure: there is no fallback to the built-in world.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from gloomwood.content.default_world import create_default_world
from gloomwood.models.world import World

logger = logging.getLogger(__name__)


class WorldLoadError(Exception):
    """Raised when a world description cannot be read or is malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load world from {path}: {reason}")


def load_world(path: str | Path) -> World:
    """
    Load a world from a JSON file.

    Args:
        path: Location of the world description

    Returns:
        The validated World

    Raises:
        WorldLoadError: If the file cannot be read or fails validation
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.error("Reading world file %s failed: %s", path, e)
        raise WorldLoadError(path, str(e)) from e

    try:
        world = World.model_validate_json(raw)
    except ValidationError as e:
        logger.error("World file %s is malformed: %s", path, e)
        raise WorldLoadError(path, f"{e.error_count()} validation error(s)\n{e}") from e

    logger.info("Loaded world from %s with %d entities", path, len(world.entities))
    return world


def save_world(world: World, path: str | Path) -> None:
    """Write a world description, e.g. to start authoring from the default world."""
    Path(path).write_text(world.model_dump_json(indent=2), encoding="utf-8")


def initial_world(path: str | Path | None = None) -> World:
    """The world to start a game with: loaded from ``path`` or the built-in one."""
    if path is None:
        return create_default_world()
    return load_world(path)
