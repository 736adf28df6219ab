"""Shared fixtures: a small hand-built world and a scripted dice source."""

from __future__ import annotations

import pytest

from gloomwood.engine import ScriptedInput
from gloomwood.models import World, create_actor, create_item, create_passage, create_room

CLEARING = 0
HUT = 1
PLAYER = 2
NORTH = 3
DEAD_END = 4
SOUTH = 5
SWORD = 6
APPLE = 7
WOLF = 8
HERMIT = 9
LAMP = 10
COIN_A = 11
COIN_B = 12
RAT = 13
STONE = 14
COIN_HUT = 15
PELT = 16


class FixedRoll:
    """Stand-in for random.Random that returns pre-set rolls."""

    def __init__(self, *rolls: int) -> None:
        self.rolls = list(rolls)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        if not self.rolls:
            raise AssertionError("unexpected roll")
        return self.rolls.pop(0)


def build_world() -> World:
    """
    Clearing --north--> Hut, Hut --south--> Clearing.

    The player stands in the clearing holding an apple.
    """
    entities = [
        create_room(CLEARING, "Clearing", "A quiet clearing."),
        create_room(HUT, "Hut", "A smoky hut."),
        create_actor(PLAYER, ["me", "yourself"], CLEARING, "It's you.", health=80),
        create_passage(NORTH, ["north"], CLEARING, "A trail leads north to a hut.", HUT),
        create_passage(DEAD_END, ["south", "west"], CLEARING, "Only brambles that way."),
        create_passage(SOUTH, ["south"], HUT, "The door opens south.", CLEARING),
        create_item(SWORD, "rusty sword", CLEARING, "A rusty sword lies here.", attack_power=20),
        create_item(APPLE, "apple", PLAYER, "A shiny apple.", consumable_health=10),
        create_actor(WOLF, ["wolf"], HUT, "A snarling wolf.", health=100, attack_power=10, is_enemy=True),
        create_actor(HERMIT, ["hermit"], HUT, "An old hermit.", health=30),
        create_item(LAMP, "lamp", HERMIT, "An oil lamp."),
        create_item(COIN_A, "coin", CLEARING, "A copper coin."),
        create_item(COIN_B, "coin", CLEARING, "A silver coin."),
        create_actor(RAT, ["rat"], CLEARING, "A dead rat.", health=0, attack_power=5, is_enemy=True),
        create_item(STONE, "stone", HUT, "A smooth stone."),
        create_item(COIN_HUT, "coin", HUT, "A gold coin."),
        create_item(PELT, "pelt", WOLF, "A grey pelt."),
    ]
    return World(entities=entities, player_id=PLAYER)


@pytest.fixture
def world() -> World:
    return build_world()


@pytest.fixture
def port() -> ScriptedInput:
    return ScriptedInput()
