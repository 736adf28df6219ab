"""
Default World for Gloomwood.

A small forest with a tavern, a cave, a troll bridge and a bandit camp.
The player wakes up lost in the forest; the game is won once the bear,
the troll and the bandits have all been beaten.
"""

from __future__ import annotations

from gloomwood.models import (
    World,
    create_actor,
    create_item,
    create_passage,
    create_room,
)

# Rooms
FOREST = 0
TAVERN = 1
CAVE = 2
BRIDGE = 3
CAMP = 4

# Actors
PLAYER = 5
BEAR = 6
TROLL = 7
BANDITS = 8
BARKEEP = 9

INTRO = (
    "You find yourself lost in a gloomy forest. You see a column of smoke rising "
    "in the sky. It seems to be very far away."
)


def create_default_world() -> World:
    """
    Create the built-in world.

    Returns:
        A fresh World; each call builds new entities so a restarted game
        never shares state with the previous one.
    """
    entities = [
        # =====================================================================
        # Rooms
        # =====================================================================
        create_room(FOREST, "Forest", "Tall pines block out most of the light. Look out for tree people."),
        create_room(TAVERN, "Tavern", "An old tavern that smells of smoke and spilled ale."),
        create_room(CAVE, "Cave", "A damp cave. Bones are scattered across the floor."),
        create_room(BRIDGE, "Bridge", "A crumbling stone bridge over a roaring river."),
        create_room(CAMP, "Camp", "The bandit camp. The smoke you saw rises from its fire."),
        # =====================================================================
        # Actors
        # =====================================================================
        create_actor(PLAYER, ["yourself", "me", "myself"], FOREST, "You look tired but determined.", health=100),
        create_actor(
            BEAR, ["bear"], CAVE, "A huge brown bear growls at you.",
            health=100, attack_power=20, is_enemy=True,
        ),
        create_actor(
            TROLL, ["troll"], BRIDGE, "A troll guards the bridge, leaning on a club.",
            health=120, attack_power=25, is_enemy=True,
        ),
        create_actor(
            BANDITS, ["bandits"], CAMP, "A band of bandits sits around the fire.",
            health=150, attack_power=30, is_enemy=True,
        ),
        create_actor(BARKEEP, ["barkeep"], TAVERN, "The barkeep polishes a mug and nods at you.", health=50),
    ]

    def add_item(label: str, location: int, description: str, **kwargs: int) -> None:
        entities.append(create_item(len(entities), label, location, description, **kwargs))

    def add_passage(labels: list[str], location: int, description: str, destination: int | None = None) -> None:
        entities.append(create_passage(len(entities), labels, location, description, destination))

    # =========================================================================
    # Items
    # =========================================================================
    add_item("rusty sword", FOREST, "A rusty sword sticks out of the mud.", attack_power=20)
    add_item("berries", FOREST, "A bush heavy with red berries.", consumable_health=10)
    add_item("axe", BARKEEP, "A sharp woodcutter's axe.", attack_power=35)
    add_item("potion", BARKEEP, "A small bottle of healing potion.", consumable_health=40)
    add_item("honey", BEAR, "A dripping piece of honeycomb.", consumable_health=25)
    add_item("club", TROLL, "A heavy troll club.", attack_power=45)
    add_item("gold", BANDITS, "A pouch of stolen gold.")

    # =========================================================================
    # Passages
    # =========================================================================
    add_passage(["north"], FOREST, "A path to the north leads out of the forest to an old tavern.", TAVERN)
    add_passage(["east"], FOREST, "To the east, a dark opening in the hillside.", CAVE)
    add_passage(["south"], TAVERN, "The path south leads back into the forest.", FOREST)
    add_passage(["north"], TAVERN, "A road north leads towards the river.", BRIDGE)
    add_passage(["west"], CAVE, "Daylight to the west: the way back to the forest.", FOREST)
    add_passage(["south"], BRIDGE, "The road south returns to the tavern.", TAVERN)
    add_passage(["north"], BRIDGE, "Across the bridge to the north, a column of smoke.", CAMP)
    add_passage(["south"], CAMP, "The bridge lies to the south.", BRIDGE)

    # Scenery: several aliases each, so look never lists them
    add_passage(["west", "south"], FOREST, "You see nothing but trees. There is no other path in that direction.")
    add_passage(["east", "west"], TAVERN, "You walk into a wall. The door is to the south.")
    add_passage(["north", "south", "east"], CAVE, "Solid rock. The only way out is west.")
    add_passage(["east", "west"], BRIDGE, "Nothing but the roaring river below.")
    add_passage(["north", "east", "west"], CAMP, "Thick brambles surround the camp.")

    return World(entities=entities, player_id=PLAYER)
