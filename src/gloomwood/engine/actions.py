"""
Action Handlers for Gloomwood.

One handler per intent. Each combines the disambiguator and the distance
classifier into at most one change to the world and returns the report
the player sees. Anything the player got wrong comes back as a report,
not an exception.
"""

from __future__ import annotations

import random

from gloomwood.engine.combat import CombatEngine
from gloomwood.engine.distance import classify
from gloomwood.engine.ports import InputPort
from gloomwood.engine.reports import describe_inventory, describe_room, move_entity
from gloomwood.engine.resolver import resolve_possession, resolve_visible
from gloomwood.models.entity import Distance
from gloomwood.models.world import World

INVALID_COMMAND = "Invalid command!!"

HELP_TEXT = """Commands:
  look              - describe your surroundings
  go <place>        - walk through a passage or to a nearby place
  get <item>        - pick something up
  drop <item>       - put something you carry down
  ask <item>        - ask whoever is here for something they have
  give <item>       - trade with whoever is here
  eat/drink <item>  - consume something you carry
  attack <enemy>    - start a fight
  inventory         - list what you carry
  map               - show the places you know of
  help              - show this message
  quit              - leave the game"""

QUIT_TEXT = "Quitting.\nThank you for playing!"


class ActionHandlers:
    """Handlers for every player command, bound to one world."""

    def __init__(
        self,
        world: World,
        port: InputPort,
        rng: random.Random,
        combat_prompt: str = "combat> ",
    ) -> None:
        self.world = world
        self.port = port
        self.rng = rng
        self.combat_prompt = combat_prompt

    # -------------------------------------------------------------------------
    # Exploration
    # -------------------------------------------------------------------------

    def look(self, noun: str = "") -> str:
        """Describe the room. Looking at a particular thing is not supported."""
        if noun:
            return f"{INVALID_COMMAND} Just type 'look' to look around."
        return describe_room(self.world)

    def go(self, noun: str) -> str:
        """
        Move the player.

        A room next door (OVER_THERE) is entered directly, which lets the
        player type "go tavern". A passage in the room takes the player to
        its destination; a passage without one only shows its description.
        """
        lookup = resolve_visible(self.world, noun, "where you want to go")
        if not lookup.resolved:
            return lookup.message

        entity = self.world.get(lookup.entity_id)
        distance = classify(self.world, self.world.player_id, entity.id)

        if distance == Distance.PLAYER:
            return "You should not be doing that to yourself."
        if distance == Distance.OVER_THERE:
            return self._enter(entity.id)
        if entity.destination is not None:
            return self._enter(entity.destination)
        return entity.description

    def _enter(self, room_id: int) -> str:
        self.world.player.contained_in = room_id
        return "OK.\n\n" + describe_room(self.world)

    def map(self) -> str:
        """One line per room with the passages leading out of it."""
        here = self.world.player_location
        lines = ["Map:"]
        for room in self.world.rooms():
            exits = ", ".join(
                f"{p.name} -> {self.world.get(p.destination).name}"
                for p in self.world.passages_from(room.id)
            )
            marker = "*" if room.id == here else " "
            lines.append(f"{marker} {room.name}: {exits or 'no way out'}")
        lines.append("(* marks where you are)")
        return "\n".join(lines)

    # -------------------------------------------------------------------------
    # Items
    # -------------------------------------------------------------------------

    def get(self, noun: str) -> str:
        lookup = resolve_visible(self.world, noun, "what you want to get")
        if not lookup.resolved:
            return lookup.message

        entity = self.world.get(lookup.entity_id)
        distance = classify(self.world, self.world.player_id, entity.id)

        if distance == Distance.PLAYER:
            return "You should not be doing that to yourself."
        if distance == Distance.HELD:
            return f"You already have the {entity.name}."
        if distance == Distance.OVER_THERE:
            return "Too far away, move closer please."
        if not entity.is_item:
            return f"You can't get the {entity.name}."
        return move_entity(self.world, entity.id, self.world.player_id)

    def drop(self, noun: str) -> str:
        lookup = resolve_possession(self.world, self.world.player_id, noun, "drop")
        if not lookup.resolved:
            return lookup.message
        return move_entity(self.world, lookup.entity_id, self.world.player_location)

    def ask(self, noun: str) -> str:
        """Take something from whoever shares the player's room."""
        return self._take_from_actor(noun, "ask")

    def give(self, noun: str) -> str:
        """
        Trade with whoever shares the player's room.

        The object moves to the player, exactly as ``ask`` does. Worlds and
        tests written against this behaviour depend on the direction.
        """
        return self._take_from_actor(noun, "give")

    def _take_from_actor(self, noun: str, verb: str) -> str:
        actor = self.world.actor_here()
        lookup = resolve_possession(self.world, actor.id if actor else None, noun, verb)
        if not lookup.resolved:
            return lookup.message
        return move_entity(self.world, lookup.entity_id, self.world.player_id)

    def inventory(self) -> str:
        return describe_inventory(self.world)

    def consume(self, noun: str) -> str:
        """Eat or drink something carried, restoring its health value."""
        lookup = resolve_possession(self.world, self.world.player_id, noun, "consume")
        if not lookup.resolved:
            return lookup.message

        entity = self.world.get(lookup.entity_id)
        if not entity.is_consumable:
            return f"You can't consume the {entity.name}."

        player = self.world.player
        restored = entity.health or 0
        player.health = (player.health or 0) + restored
        entity.contained_in = None
        return (
            f"You consume the {entity.name} and regain {restored} health. "
            f"Your health: {player.health}."
        )

    # -------------------------------------------------------------------------
    # Combat
    # -------------------------------------------------------------------------

    def attack(self, noun: str) -> str:
        lookup = resolve_visible(self.world, noun, "what you want to attack")
        if not lookup.resolved:
            return lookup.message

        entity = self.world.get(lookup.entity_id)
        distance = classify(self.world, self.world.player_id, entity.id)

        if distance == Distance.PLAYER:
            return "You should not attack yourself."
        if not entity.is_enemy:
            return f"You can't attack the {entity.name}."
        if not entity.is_alive():
            return f"The {entity.name} is already dead."
        if distance != Distance.HERE:
            return "Too far away, move closer please."

        engine = CombatEngine(self.world, self.port, self.rng, prompt=self.combat_prompt)
        return engine.engage(entity.id).report

    # -------------------------------------------------------------------------
    # Meta
    # -------------------------------------------------------------------------

    def help(self) -> str:
        return HELP_TEXT

    def quit(self) -> str:
        return QUIT_TEXT

    def unknown(self, original_input: str) -> str:
        return f"{INVALID_COMMAND} I don't know how to '{original_input}'. Type 'help' for commands."
