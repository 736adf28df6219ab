"""
Core Data Models for Gloomwood.

These models define the ontology of the game world: a flat store of
Entities linked only by integer containment references.
"""

from gloomwood.models.entity import (
    Distance,
    Entity,
    create_actor,
    create_item,
    create_passage,
    create_room,
)
from gloomwood.models.world import GameStatus, World

__all__ = [
    "Distance",
    "Entity",
    "GameStatus",
    "World",
    "create_actor",
    "create_item",
    "create_passage",
    "create_room",
]
