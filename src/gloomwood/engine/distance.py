"""
Distance Classifier for Gloomwood.

Decides how reachable one entity is from another, purely from the
containment graph and the passages in the origin's room.
"""

from __future__ import annotations

from gloomwood.models.entity import Distance
from gloomwood.models.world import World


def classify(world: World, from_id: int | None, to_id: int | None) -> Distance:
    """
    Classify the distance from one entity to another.

    Args:
        world: The entity store
        from_id: Origin entity, usually the player
        to_id: Entity being reached for; None when nothing was resolved

    Returns:
        The nearest Distance category that holds
    """
    if not world.exists(to_id) or not world.exists(from_id):
        return Distance.UNKNOWN
    if to_id == from_id:
        return Distance.PLAYER

    origin = world.get(from_id)
    target = world.get(to_id)

    if target.contained_in == from_id:
        return Distance.HELD
    if origin.contained_in == to_id:
        return Distance.LOCATION
    if origin.contained_in is not None and target.contained_in == origin.contained_in:
        return Distance.HERE
    if world.passage_between(origin.contained_in, to_id) is not None:
        return Distance.OVER_THERE
    return Distance.NOT_HERE
