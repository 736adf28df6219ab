"""Text builders shared by the action handlers and the combat loop."""

from __future__ import annotations

from gloomwood.models.world import World

NOTHING_CARRIED = "You currently do not have anything."


def describe_room(world: World) -> str:
    """The player's room, its description, and what is lying around in it."""
    room = world.get(world.player_location)
    lines = [f"You are in the {room.name}.", room.description]

    visible = [
        entity.description or entity.name
        for entity in world.contents(room.id)
        if entity.id != world.player_id and not entity.is_scenery()
    ]
    if visible:
        lines.append("")
        lines.append("You see:")
        lines.extend(visible)
    return "\n".join(lines)


def describe_inventory(world: World) -> str:
    carried = world.contents(world.player_id)
    if not carried:
        return NOTHING_CARRIED
    lines = ["You have:"]
    for item in carried:
        lines.append(f"- {item.name}: {item.description}" if item.description else f"- {item.name}")
    lines.append(f"Health: {world.player.health}")
    return "\n".join(lines)


def describe_move(world: World, entity_id: int, to_id: int) -> str:
    """
    Describe moving an entity, before the move happens.

    Entities only ever move into the player's hands or onto the floor of
    the player's room. Picking something up from the floor reads
    differently from taking it out of someone's hands.
    """
    entity = world.get(entity_id)

    if to_id == world.player_location:
        return f"You drop the {entity.name}."
    if entity.contained_in == world.player_location:
        return f"You pick up the {entity.name}."
    source = world.get(entity.contained_in)
    return f"You get the {entity.name} from the {source.name}."


def move_entity(world: World, entity_id: int, to_id: int) -> str:
    """Move an entity into a new container and report it."""
    report = describe_move(world, entity_id, to_id)
    world.get(entity_id).contained_in = to_id
    return report
